"""
Double domain — Векторы и матрицы над float

E = Q = N = P = float

Сравнение по значению — обычное == для float без толерантности
(0.0 == -0.0, NaN != NaN). Структурное равенство сравнивает точное
битовое представление через float.hex(), поэтому 0.0 и -0.0 структурно
различны, а два NaN структурно равны.
"""

import math
from collections.abc import Mapping
from typing import Any

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.field import QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector


class DoubleField(QuotientField[float, float, float, float]):
    """Поле float (самозамкнутое относительно деления)"""

    name = "double"
    element_types = (float,)
    element_schema = {"type": "number"}

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        return a / b

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0

    def negate(self, a: float) -> float:
        return -a

    def embed(self, a: float) -> float:
        return a

    def absolute(self, a: float) -> float:
        return abs(a)

    def sqrt(self, p: float) -> float:
        return math.sqrt(p)

    def structural_key(self, a: float) -> str:
        return a.hex()

    def vector_of(self, index_to_element: Mapping[int, float]) -> "DoubleVector":
        return DoubleVector(index_to_element)

    def matrix_of(self, cell_to_element: Mapping[tuple[int, int], float]) -> "DoubleMatrix":
        return DoubleMatrix(cell_to_element)

    def encode(self, a: float) -> float:
        return a

    def decode(self, raw: Any) -> float:
        return float(raw)


class DoubleVector(AbstractVector[float, float, float]):
    field = DoubleField()


class DoubleMatrix(AbstractMatrix[float, float, float]):
    field = DoubleField()


class DoubleVectorBuilder(AbstractVectorBuilder[float, DoubleVector]):
    field = DoubleField()


class DoubleMatrixBuilder(AbstractMatrixBuilder[float, DoubleMatrix]):
    field = DoubleField()
