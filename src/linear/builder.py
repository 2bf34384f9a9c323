"""
Builders — Инкрементальная сборка векторов и матриц

Builder накапливает разреженные элементы для заданного размера, а при
завершении проверяет индексы, заполняет пропуски значениями по умолчанию
(computation_of_absent) и замораживает результат в immutable тип домена.

Жизненный цикл: accumulating → completed (терминальное состояние).

ПОЛИТИКА ДУБЛИКАТОВ:
Повторный индекс отклоняется сразу в put() (DuplicateIndexError), а build()
повторно проверяет уникальность перед заморозкой.

ПОТОКОБЕЗОПАСНОСТЬ:
Builder — однопоточный объект без внутренних блокировок. Конкурентная запись
в один builder из нескольких потоков — ответственность вызывающего кода.
"""

from abc import ABC
from collections.abc import Callable
from itertools import product
from typing import Any, ClassVar, Generic, TypeVar

from src.linear.entry import MatrixEntry, VectorEntry
from src.linear.errors import (
    BuilderCompletedError,
    DuplicateIndexError,
    EmptyConstructionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    InvariantViolationError,
    require_dimension,
)
from src.linear.field import QuotientField

E = TypeVar("E")
V = TypeVar("V")
M = TypeVar("M")

B = TypeVar("B", bound="_SingleUseBuilder")


def _validate_index(value: Any, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if value < 1:
        raise IndexOutOfRangeError(f"expected {name} >= 1 but {name} = {value}")
    return value


class _SingleUseBuilder(ABC):
    """Общее состояние accumulating/completed"""

    field: ClassVar[QuotientField]

    def __init__(self) -> None:
        self.computation_of_absent: Callable[..., Any] = self._default_absent
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def with_computation_of_absent(self: B, computation: Callable[..., Any]) -> B:
        """Задать генератор значений для незаполненных позиций."""
        self._require_accumulating()
        self.computation_of_absent = computation
        return self

    def _default_absent(self, *_: int) -> Any:
        return self.field.zero

    def _require_accumulating(self) -> None:
        if self._completed:
            raise BuilderCompletedError(
                f"{type(self).__name__} was already completed by build() and cannot be reused"
            )

    def _complete(self) -> None:
        self._require_accumulating()
        self._completed = True


# =============================================================================
# VECTOR BUILDER
# =============================================================================


class AbstractVectorBuilder(_SingleUseBuilder, Generic[E, V]):
    """
    Builder векторов домена.

    Example:
        >>> LongVectorBuilder(3).put(1, 7).build()
        LongVector(map={1: 7, 2: 0, 3: 0})

    Raises:
        ValueError: Если size < 1
    """

    def __init__(self, size: int) -> None:
        super().__init__()
        self.size = require_dimension(size, "size")
        self._entries: list[VectorEntry] = []
        self._indices: set[int] = set()

    @property
    def entries(self) -> tuple[VectorEntry, ...]:
        """Накопленные элементы в порядке добавления"""
        return tuple(self._entries)

    def put(self, index: int, element: E) -> "AbstractVectorBuilder[E, V]":
        """
        Добавить элемент по индексу.

        Raises:
            BuilderCompletedError: Если builder уже завершён
            IndexOutOfRangeError: Если index < 1
            DuplicateIndexError: Если index уже задан
            TypeError: Если элемент не из домена
        """
        self._require_accumulating()
        _validate_index(index, "index")
        self.field.check_element(element)
        if index in self._indices:
            raise DuplicateIndexError(f"index {index} was already supplied")
        self._indices.add(index)
        self._entries.append(VectorEntry(index=index, element=element))
        return self

    def build(self) -> V:
        """
        Проверить, дополнить и заморозить вектор.

        Порядок проверок:
            1. entries не пусты
            2. max(index) <= size
            3. индексы уникальны
            4. отсутствующие индексы заполняются computation_of_absent(index)
            5. множество индексов == {1..size}

        Raises:
            BuilderCompletedError: Если builder уже завершён
            EmptyConstructionError: Если не задано ни одного элемента
            IndexOverflowError: Если max(index) > size
            DuplicateIndexError: Если индекс встречается дважды
            InvariantViolationError: Если после заполнения индексы не плотные
        """
        self._complete()
        if not self._entries:
            raise EmptyConstructionError("expected entries not to be empty but entries = []")

        indices = [entry.index for entry in self._entries]
        max_index = max(indices)
        if max_index > self.size:
            raise IndexOverflowError(
                f"expected max index <= size but {max_index} > {self.size}"
            )
        if len(set(indices)) != len(indices):
            raise DuplicateIndexError(
                f"expected distinct indices but {len(set(indices))} distinct of {len(indices)}"
            )

        present = set(indices)
        entries = self._entries + [
            VectorEntry(index=i, element=self.computation_of_absent(i))
            for i in range(1, self.size + 1)
            if i not in present
        ]
        index_to_element = {entry.index: entry.element for entry in sorted(entries)}
        if set(index_to_element) != set(range(1, self.size + 1)):
            raise InvariantViolationError(
                f"expected indices == 1..{self.size} but indices = {sorted(index_to_element)}"
            )
        return self.field.vector_of(index_to_element)


# =============================================================================
# MATRIX BUILDER
# =============================================================================


class AbstractMatrixBuilder(_SingleUseBuilder, Generic[E, M]):
    """
    Builder матриц домена.

    computation_of_absent вызывается как computation_of_absent(row, column).

    Raises:
        ValueError: Если rows < 1 или columns < 1
    """

    def __init__(self, rows: int, columns: int) -> None:
        super().__init__()
        self.rows = require_dimension(rows, "rows")
        self.columns = require_dimension(columns, "columns")
        self._entries: list[MatrixEntry] = []
        self._cells: set[tuple[int, int]] = set()

    @property
    def entries(self) -> tuple[MatrixEntry, ...]:
        return tuple(self._entries)

    def put(self, row: int, column: int, element: E) -> "AbstractMatrixBuilder[E, M]":
        """
        Добавить элемент в ячейку (row, column).

        Raises:
            BuilderCompletedError: Если builder уже завершён
            IndexOutOfRangeError: Если row < 1 или column < 1
            DuplicateIndexError: Если ячейка уже задана
            TypeError: Если элемент не из домена
        """
        self._require_accumulating()
        _validate_index(row, "row")
        _validate_index(column, "column")
        self.field.check_element(element)
        if (row, column) in self._cells:
            raise DuplicateIndexError(f"cell ({row}, {column}) was already supplied")
        self._cells.add((row, column))
        self._entries.append(MatrixEntry(row=row, column=column, element=element))
        return self

    def build(self) -> M:
        """
        Проверить, дополнить и заморозить матрицу.

        Raises:
            BuilderCompletedError: Если builder уже завершён
            EmptyConstructionError: Если не задано ни одного элемента
            IndexOverflowError: Если max(row) > rows или max(column) > columns
            DuplicateIndexError: Если ячейка встречается дважды
            InvariantViolationError: Если после заполнения ячейки не плотные
        """
        self._complete()
        if not self._entries:
            raise EmptyConstructionError("expected entries not to be empty but entries = []")

        max_row = max(entry.row for entry in self._entries)
        if max_row > self.rows:
            raise IndexOverflowError(f"expected max row <= rows but {max_row} > {self.rows}")
        max_column = max(entry.column for entry in self._entries)
        if max_column > self.columns:
            raise IndexOverflowError(
                f"expected max column <= columns but {max_column} > {self.columns}"
            )
        cells = [entry.cell for entry in self._entries]
        if len(set(cells)) != len(cells):
            raise DuplicateIndexError(
                f"expected distinct cells but {len(set(cells))} distinct of {len(cells)}"
            )

        present = set(cells)
        expected = list(product(range(1, self.rows + 1), range(1, self.columns + 1)))
        entries = self._entries + [
            MatrixEntry(row=i, column=j, element=self.computation_of_absent(i, j))
            for i, j in expected
            if (i, j) not in present
        ]
        cell_to_element = {entry.cell: entry.element for entry in sorted(entries)}
        if set(cell_to_element) != set(expected):
            raise InvariantViolationError(
                f"expected cells == {{1..{self.rows}}} x {{1..{self.columns}}} "
                f"but cells = {sorted(cell_to_element)}"
            )
        return self.field.matrix_of(cell_to_element)
