"""
Long domain — Векторы и матрицы над целыми числами

E = int, Q = float, N = float, P = int

Целые не замкнуты относительно деления, поэтому частное и нормы лежат
в float, а скалярный квадрат остаётся точным int.
Равенство по значению совпадает со структурным (точный домен).
"""

import math
from collections.abc import Mapping
from typing import Any

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.field import QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector


class LongField(QuotientField[int, float, float, int]):
    """Кольцо int с частным во float"""

    name = "long"
    element_types = (int,)
    element_schema = {"type": "integer"}

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide(self, a: int, b: int) -> float:
        return a / b

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def negate(self, a: int) -> int:
        return -a

    def embed(self, a: int) -> float:
        return float(a)

    def absolute(self, a: int) -> float:
        return float(abs(a))

    def sqrt(self, p: int) -> float:
        return math.sqrt(p)

    def vector_of(self, index_to_element: Mapping[int, int]) -> "LongVector":
        return LongVector(index_to_element)

    def matrix_of(self, cell_to_element: Mapping[tuple[int, int], int]) -> "LongMatrix":
        return LongMatrix(cell_to_element)

    def encode(self, a: int) -> int:
        return a

    def decode(self, raw: Any) -> int:
        return int(raw)


class LongVector(AbstractVector[int, float, int]):
    field = LongField()


class LongMatrix(AbstractMatrix[int, float, int]):
    field = LongField()


class LongVectorBuilder(AbstractVectorBuilder[int, LongVector]):
    field = LongField()


class LongMatrixBuilder(AbstractMatrixBuilder[int, LongMatrix]):
    field = LongField()
