"""
AbstractMatrix — Обобщённая immutable матрица над числовым доменом

Структурный двойник AbstractVector: отображение (row, column) → элемент
с плотным множеством ячеек {1..rows} × {1..columns}. Арифметика, нормы,
след и определитель выражены через QuotientField домена.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отображение никогда не пустое
2. Множество ячеек строго {1..row_size} × {1..column_size}
3. Размеры выводятся из отображения
4. Любая операция возвращает новую матрицу
"""

from abc import ABC
from collections.abc import KeysView, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property, reduce
from itertools import product
from types import MappingProxyType
from typing import Any, ClassVar, Generic, TypeVar

from src.linear.entry import MatrixEntry
from src.linear.errors import (
    EmptyConstructionError,
    InvariantViolationError,
    NotSquareError,
    SizeMismatchError,
    require_dimension,
    require_equal_sizes,
    require_index_in_range,
)
from src.linear.field import QuotientField
from src.linear.vector import AbstractVector

E = TypeVar("E")
N = TypeVar("N")
P = TypeVar("P")

M = TypeVar("M", bound="AbstractMatrix")

Cell = tuple[int, int]


@dataclass(frozen=True, eq=False, repr=False)
class AbstractMatrix(ABC, Generic[E, N, P]):
    """
    Базовый класс матриц.

    Type parameters:
        E: тип элементов
        N: тип норм
        P: тип квадрата нормы Фробениуса

    Raises:
        EmptyConstructionError: Если отображение пустое
        InvariantViolationError: Если ячейки не равны {1..rows} × {1..columns}
        TypeError: Если ключ не пара int или элемент не из домена
    """

    cell_to_element: Mapping[Cell, E]

    field: ClassVar[QuotientField]

    def __post_init__(self) -> None:
        if not isinstance(self.cell_to_element, Mapping):
            raise TypeError(
                f"expected a mapping of (row, column) to element but got "
                f"{type(self.cell_to_element).__name__}"
            )
        if not self.cell_to_element:
            raise EmptyConstructionError(
                "expected a non-empty mapping but the mapping is empty"
            )
        for cell, element in self.cell_to_element.items():
            if not _is_cell(cell):
                raise TypeError(f"expected (row, column) pair of ints but got {cell!r}")
            self.field.check_element(element)

        cells = set(self.cell_to_element)
        max_row = max(row for row, _ in cells)
        max_column = max(column for _, column in cells)
        expected = set(product(range(1, max_row + 1), range(1, max_column + 1)))
        if cells != expected:
            raise InvariantViolationError(
                f"expected cells == {{1..{max_row}}} x {{1..{max_column}}} "
                f"but cells = {sorted(cells)}"
            )

        frozen = MappingProxyType(dict(sorted(self.cell_to_element.items())))
        object.__setattr__(self, "cell_to_element", frozen)

    @classmethod
    def of(cls: type[M], rows: Sequence[Sequence[Any]]) -> M:
        """
        Матрица из вложенных последовательностей (по строкам).

        Raises:
            EmptyConstructionError: Если строк или столбцов нет
            InvariantViolationError: Если строки разной длины
        """
        return cls(
            {
                (i, j): element
                for i, row in enumerate(rows, start=1)
                for j, element in enumerate(row, start=1)
            }
        )

    @classmethod
    def identity(cls: type[M], size: int) -> M:
        """
        Единичная матрица size × size.

        Raises:
            TypeError: Если size не int
            ValueError: Если size < 1
        """
        require_dimension(size, "size")
        field = cls.field
        return cls(
            {
                (i, j): field.one if i == j else field.zero
                for i, j in product(range(1, size + 1), repeat=2)
            }
        )

    # =========================================================================
    # ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    @cached_property
    def row_indices(self) -> tuple[int, ...]:
        return tuple(sorted({row for row, _ in self.cell_to_element}))

    @cached_property
    def column_indices(self) -> tuple[int, ...]:
        return tuple(sorted({column for _, column in self.cell_to_element}))

    @property
    def row_size(self) -> int:
        return len(self.row_indices)

    @property
    def column_size(self) -> int:
        return len(self.column_indices)

    @property
    def cells(self) -> KeysView[Cell]:
        """Ячейки в row-major порядке (set-like view)"""
        return self.cell_to_element.keys()

    @cached_property
    def elements(self) -> tuple[E, ...]:
        """Элементы в row-major порядке"""
        return tuple(self.cell_to_element.values())

    @cached_property
    def entries(self) -> tuple[MatrixEntry, ...]:
        return tuple(
            MatrixEntry(row=row, column=column, element=element)
            for (row, column), element in self.cell_to_element.items()
        )

    @cached_property
    def rows(self) -> Mapping[int, AbstractVector]:
        """Строки как векторы связанного типа"""
        return MappingProxyType({i: self.row(i) for i in self.row_indices})

    @cached_property
    def columns(self) -> Mapping[int, AbstractVector]:
        """Столбцы как векторы связанного типа"""
        return MappingProxyType({j: self.column(j) for j in self.column_indices})

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self: M, summand: M) -> M:
        """
        Сумма this + summand.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_same_shape(summand)
        return self._derive(
            {c: self.field.add(e, summand.cell_to_element[c]) for c, e in self.cell_to_element.items()}
        )

    def subtract(self: M, subtrahend: M) -> M:
        """
        Разность this - subtrahend.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_same_shape(subtrahend)
        return self._derive(
            {
                c: self.field.subtract(e, subtrahend.cell_to_element[c])
                for c, e in self.cell_to_element.items()
            }
        )

    def multiply(self: M, factor: M) -> M:
        """
        Матричное произведение this · factor.

        Raises:
            SizeMismatchError: Если column_size != factor.row_size
        """
        self._require_same_type(factor)
        if self.column_size != factor.row_size:
            raise SizeMismatchError(
                f"expected column_size == factor.row_size but "
                f"{self.column_size} != {factor.row_size}"
            )
        field = self.field
        return self._derive(
            {
                (i, j): field.sum(
                    field.multiply(self.element(i, k), factor.element(k, j))
                    for k in self.column_indices
                )
                for i, j in product(self.row_indices, factor.column_indices)
            }
        )

    def multiply_vector(self, vector: AbstractVector) -> AbstractVector:
        """
        Произведение матрицы на вектор-столбец.

        Raises:
            SizeMismatchError: Если column_size != vector.size
        """
        if vector.field != self.field:
            raise TypeError(
                f"expected a vector over {self.field!r} but got {type(vector).__name__}"
            )
        require_equal_sizes(self.column_size, vector.size)
        field = self.field
        return field.vector_of(
            {
                i: field.sum(
                    field.multiply(self.element(i, k), vector.element(k))
                    for k in self.column_indices
                )
                for i in self.row_indices
            }
        )

    def scalar_multiply(self: M, scalar: E) -> M:
        self.field.check_element(scalar)
        return self._derive(
            {c: self.field.multiply(scalar, e) for c, e in self.cell_to_element.items()}
        )

    def negate(self: M) -> M:
        return self._derive({c: self.field.negate(e) for c, e in self.cell_to_element.items()})

    def transpose(self: M) -> M:
        return self._derive({(j, i): e for (i, j), e in self.cell_to_element.items()})

    def minor(self: M, row: int, column: int) -> M:
        """
        Подматрица без строки row и столбца column.

        Raises:
            IndexOutOfRangeError: Если row или column вне диапазона
            EmptyConstructionError: Если матрица имеет одну строку или один столбец
        """
        require_index_in_range(row, self.row_size, "row")
        require_index_in_range(column, self.column_size, "column")
        return self._derive(
            {
                (i - 1 if i > row else i, j - 1 if j > column else j): e
                for (i, j), e in self.cell_to_element.items()
                if i != row and j != column
            }
        )

    # =========================================================================
    # СЛЕД И ОПРЕДЕЛИТЕЛЬ
    # =========================================================================

    def trace(self) -> E:
        """
        Сумма диагональных элементов.

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        self._require_square()
        return self.field.sum(self.element(i, i) for i in self.row_indices)

    def determinant(self) -> E:
        """
        Определитель без деления (алгоритм Bird).

        Использует только сложение, вычитание и умножение, поэтому определён
        для доменов, не замкнутых относительно деления (целые, гауссовы целые).

        Алгоритм:
            X_1 = A, X_{k+1} = mu(X_k) · A
            mu(X): верхнетреугольная, mu_ij = X_ij при i < j,
                   mu_ii = -(X_{i+1,i+1} + ... + X_nn)
            det(A) = (-1)^(n-1) · (X_n)_11

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        self._require_square()
        field = self.field
        n = self.row_size
        a = [[self.element(i, j) for j in range(1, n + 1)] for i in range(1, n + 1)]

        x = a
        for _ in range(n - 1):
            mu = [[field.zero] * n for _ in range(n)]
            trailing = field.zero
            for i in reversed(range(n)):
                mu[i][i] = field.negate(trailing)
                trailing = field.add(trailing, x[i][i])
                for j in range(i + 1, n):
                    mu[i][j] = x[i][j]
            x = [
                [field.sum(field.multiply(mu[i][k], a[k][j]) for k in range(i, n)) for j in range(n)]
                for i in range(n)
            ]

        return x[0][0] if n % 2 == 1 else field.negate(x[0][0])

    # =========================================================================
    # ПРЕДИКАТЫ ФОРМЫ
    # =========================================================================

    def is_square(self) -> bool:
        return self.row_size == self.column_size

    def is_upper_triangular(self) -> bool:
        return self.is_square() and all(
            self._is_zero(e) for (i, j), e in self.cell_to_element.items() if i > j
        )

    def is_lower_triangular(self) -> bool:
        return self.is_square() and all(
            self._is_zero(e) for (i, j), e in self.cell_to_element.items() if i < j
        )

    def is_triangular(self) -> bool:
        return self.is_upper_triangular() or self.is_lower_triangular()

    def is_diagonal(self) -> bool:
        return self.is_upper_triangular() and self.is_lower_triangular()

    def is_identity(self) -> bool:
        return self.is_diagonal() and all(
            self.field.equal_by_comparing(self.element(i, i), self.field.one)
            for i in self.row_indices
        )

    def is_symmetric(self) -> bool:
        return self.is_square() and self.equals_by_comparing(self.transpose())

    def is_skew_symmetric(self) -> bool:
        return self.is_square() and self.equals_by_comparing(self.transpose().negate())

    # =========================================================================
    # НОРМЫ
    # =========================================================================

    def max_abs_column_sum_norm(self) -> N:
        """1-норма: максимум по столбцам суммы модулей"""
        return max(self._abs_sum(self.column(j).elements) for j in self.column_indices)

    def max_abs_row_sum_norm(self) -> N:
        """Бесконечная норма: максимум по строкам суммы модулей"""
        return max(self._abs_sum(self.row(i).elements) for i in self.row_indices)

    def frobenius_norm_pow2(self) -> P:
        return reduce(self.field.inner_add, map(self.field.abs_pow2, self.elements))

    def frobenius_norm(self) -> N:
        return self.field.sqrt(self.frobenius_norm_pow2())

    def max_norm(self) -> N:
        """Максимальный модуль элемента"""
        return max(map(self.field.absolute, self.elements))

    # =========================================================================
    # ДОСТУП К ЭЛЕМЕНТАМ
    # =========================================================================

    def element(self, row: int, column: int) -> E:
        """
        Элемент в ячейке (row, column).

        Raises:
            IndexOutOfRangeError: Если row или column вне диапазона
        """
        require_index_in_range(row, self.row_size, "row")
        require_index_in_range(column, self.column_size, "column")
        return self.cell_to_element[(row, column)]

    def entry(self, row: int, column: int) -> MatrixEntry:
        return MatrixEntry(row=row, column=column, element=self.element(row, column))

    def row(self, index: int) -> AbstractVector:
        """
        Строка index как вектор.

        Raises:
            IndexOutOfRangeError: Если index вне 1..row_size
        """
        require_index_in_range(index, self.row_size, "row")
        return self.field.vector_of({j: self.cell_to_element[(index, j)] for j in self.column_indices})

    def column(self, index: int) -> AbstractVector:
        """
        Столбец index как вектор.

        Raises:
            IndexOutOfRangeError: Если index вне 1..column_size
        """
        require_index_in_range(index, self.column_size, "column")
        return self.field.vector_of({i: self.cell_to_element[(i, index)] for i in self.row_indices})

    def contains(self, element: E) -> bool:
        return element in self.elements

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    # =========================================================================
    # РАВЕНСТВО
    # =========================================================================

    def equals_by_comparing(self: M, other: M) -> bool:
        """
        Равенство по значению во всех ячейках.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_same_shape(other)
        return all(
            self.field.equal_by_comparing(e, other.cell_to_element[c])
            for c, e in self.cell_to_element.items()
        )

    def does_not_equal_by_comparing(self: M, other: M) -> bool:
        return not self.equals_by_comparing(other)

    def _structural_keys(self) -> tuple:
        return tuple(self.field.structural_key(e) for e in self.elements)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return (
            tuple(self.cells) == tuple(other.cells)
            and self._structural_keys() == other._structural_keys()
        )

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.cells), self._structural_keys()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={dict(self.cell_to_element)!r})"

    # =========================================================================
    # ВНУТРЕННИЕ ХЕЛПЕРЫ
    # =========================================================================

    def _require_same_type(self, other: "AbstractMatrix") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__} but got {type(other).__name__}"
            )

    def _require_same_shape(self, other: "AbstractMatrix") -> None:
        self._require_same_type(other)
        if (self.row_size, self.column_size) != (other.row_size, other.column_size):
            raise SizeMismatchError(
                f"expected equal shapes but {self.row_size}x{self.column_size} "
                f"!= {other.row_size}x{other.column_size}"
            )

    def _require_square(self) -> None:
        if not self.is_square():
            raise NotSquareError(
                f"expected a square matrix but shape = {self.row_size}x{self.column_size}"
            )

    def _is_zero(self, element: E) -> bool:
        return self.field.equal_by_comparing(element, self.field.zero)

    def _abs_sum(self, elements: Sequence[E]) -> N:
        return reduce(self.field.norm_add, map(self.field.absolute, elements))

    def _derive(self: M, cell_to_element: Mapping[Cell, E]) -> M:
        return self.field.matrix_of(cell_to_element)


def _is_cell(cell: Any) -> bool:
    return (
        isinstance(cell, tuple)
        and len(cell) == 2
        and all(isinstance(i, int) and not isinstance(i, bool) for i in cell)
    )
