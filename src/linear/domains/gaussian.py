"""
Gaussian domain — Векторы и матрицы над гауссовыми целыми

E = Gaussian, Q = complex, N = float, P = int

Скалярное произведение эрмитово: Σ v_i · conj(w_i).
Скалярный квадрат Σ |v_i|² остаётся точным int, нормы лежат во float.
"""

import math
from collections.abc import Mapping
from typing import Any

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.field import QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector
from src.number.gaussian import Gaussian


class GaussianField(QuotientField[Gaussian, complex, float, int]):
    """Кольцо Z[i] с частным в complex"""

    name = "gaussian"
    element_types = (Gaussian,)
    element_schema = {
        "type": "object",
        "required": ["real", "imaginary"],
        "properties": {
            "real": {"type": "integer"},
            "imaginary": {"type": "integer"},
        },
        "additionalProperties": False,
    }

    def add(self, a: Gaussian, b: Gaussian) -> Gaussian:
        return a + b

    def subtract(self, a: Gaussian, b: Gaussian) -> Gaussian:
        return a - b

    def multiply(self, a: Gaussian, b: Gaussian) -> Gaussian:
        return a * b

    def divide(self, a: Gaussian, b: Gaussian) -> complex:
        return a / b

    @property
    def zero(self) -> Gaussian:
        return Gaussian.ZERO

    @property
    def one(self) -> Gaussian:
        return Gaussian.ONE

    def negate(self, a: Gaussian) -> Gaussian:
        return -a

    def embed(self, a: Gaussian) -> complex:
        return complex(a)

    def absolute(self, a: Gaussian) -> float:
        return abs(a)

    def abs_pow2(self, a: Gaussian) -> int:
        return a.abs_pow2()

    def inner_add(self, a: int, b: int) -> int:
        return a + b

    def sqrt(self, p: int) -> float:
        return math.sqrt(p)

    def conjugate(self, a: Gaussian) -> Gaussian:
        return a.conjugate()

    def vector_of(self, index_to_element: Mapping[int, Gaussian]) -> "GaussianVector":
        return GaussianVector(index_to_element)

    def matrix_of(
        self, cell_to_element: Mapping[tuple[int, int], Gaussian]
    ) -> "GaussianMatrix":
        return GaussianMatrix(cell_to_element)

    def encode(self, a: Gaussian) -> dict[str, int]:
        return {"real": a.real, "imaginary": a.imaginary}

    def decode(self, raw: Any) -> Gaussian:
        return Gaussian(raw["real"], raw["imaginary"])


class GaussianVector(AbstractVector[Gaussian, float, int]):
    field = GaussianField()


class GaussianMatrix(AbstractMatrix[Gaussian, float, int]):
    field = GaussianField()


class GaussianVectorBuilder(AbstractVectorBuilder[Gaussian, GaussianVector]):
    field = GaussianField()


class GaussianMatrixBuilder(AbstractMatrixBuilder[Gaussian, GaussianMatrix]):
    field = GaussianField()
