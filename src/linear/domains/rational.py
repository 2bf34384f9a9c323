"""
Rational domain — Векторы и матрицы над fractions.Fraction

E = Q = P = Fraction, N = float

Fraction всегда нормализована, поэтому равенство по значению совпадает
со структурным. Нормы (требующие корня) лежат во float.
"""

import math
from collections.abc import Mapping
from fractions import Fraction
from typing import Any, Final

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.field import QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector

# Рациональное число в записи "p" или "p/q"
FRACTION_PATTERN: Final[str] = r"^[+-]?\d+(/0*[1-9]\d*)?$"


class FractionField(QuotientField[Fraction, Fraction, float, Fraction]):
    """Поле рациональных чисел"""

    name = "fraction"
    element_types = (Fraction,)
    element_schema = {"type": "string", "pattern": FRACTION_PATTERN}

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def subtract(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def multiply(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def divide(self, a: Fraction, b: Fraction) -> Fraction:
        return a / b

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def embed(self, a: Fraction) -> Fraction:
        return a

    def absolute(self, a: Fraction) -> float:
        return float(abs(a))

    def sqrt(self, p: Fraction) -> float:
        return math.sqrt(p)

    def vector_of(self, index_to_element: Mapping[int, Fraction]) -> "FractionVector":
        return FractionVector(index_to_element)

    def matrix_of(
        self, cell_to_element: Mapping[tuple[int, int], Fraction]
    ) -> "FractionMatrix":
        return FractionMatrix(cell_to_element)

    def encode(self, a: Fraction) -> str:
        return str(a)

    def decode(self, raw: Any) -> Fraction:
        return Fraction(raw)


class FractionVector(AbstractVector[Fraction, float, Fraction]):
    field = FractionField()


class FractionMatrix(AbstractMatrix[Fraction, float, Fraction]):
    field = FractionField()


class FractionVectorBuilder(AbstractVectorBuilder[Fraction, FractionVector]):
    field = FractionField()


class FractionMatrixBuilder(AbstractMatrixBuilder[Fraction, FractionMatrix]):
    field = FractionField()
