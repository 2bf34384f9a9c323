"""
VectorEntry / MatrixEntry — Пары (индекс, элемент)

Immutable Pydantic модели, используемые одновременно как единица накопления
в builder'ах и как публичное представление элементов при итерации.
Упорядочены лексикографически по индексу.
"""

from typing import Any

from pydantic import BaseModel, Field


class VectorEntry(BaseModel):
    """
    Элемент вектора с индексом.

    Immutable модель (frozen=True). Индекс 1-based, строго int.
    """

    index: int = Field(..., ge=1, strict=True, description="Индекс (1-based)")
    element: Any = Field(..., description="Элемент числового домена")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[int]:
        return (self.index,)

    def __lt__(self, other: "VectorEntry") -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "VectorEntry") -> bool:
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: "VectorEntry") -> bool:
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: "VectorEntry") -> bool:
        return self.sort_key() >= other.sort_key()


class MatrixEntry(BaseModel):
    """
    Элемент матрицы с позицией (row, column).

    Порядок — row-major: сначала по строке, затем по столбцу.
    """

    row: int = Field(..., ge=1, strict=True, description="Строка (1-based)")
    column: int = Field(..., ge=1, strict=True, description="Столбец (1-based)")
    element: Any = Field(..., description="Элемент числового домена")

    model_config = {"frozen": True}

    @property
    def cell(self) -> tuple[int, int]:
        """Позиция (row, column)"""
        return (self.row, self.column)

    def sort_key(self) -> tuple[int, int]:
        return self.cell

    def __lt__(self, other: "MatrixEntry") -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "MatrixEntry") -> bool:
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: "MatrixEntry") -> bool:
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: "MatrixEntry") -> bool:
        return self.sort_key() >= other.sort_key()
