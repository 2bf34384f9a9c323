"""
Тесты для AbstractMatrix

Проверяет:
1. Инварианты конструирования (плотные ячейки {1..rows} × {1..columns})
2. Арифметику (add, subtract, multiply, multiply_vector, transpose)
3. След, минор и определитель (без деления)
4. Предикаты формы
5. Нормы матриц
6. Доступ к строкам, столбцам и элементам
"""

import math
from collections.abc import KeysView
from fractions import Fraction

import pytest

from src.linear import (
    EmptyConstructionError,
    IndexOutOfRangeError,
    InvariantViolationError,
    MatrixEntry,
    NotSquareError,
    SizeMismatchError,
)
from src.linear.domains import (
    DoubleMatrix,
    DoubleVector,
    FractionMatrix,
    GaussianMatrix,
    LongMatrix,
    LongVector,
)
from src.number import Gaussian


@pytest.fixture
def a() -> LongMatrix:
    """[[1, 2], [3, 4]]"""
    return LongMatrix.of([[1, 2], [3, 4]])


@pytest.fixture
def b() -> LongMatrix:
    """[[5, 6], [7, 8]]"""
    return LongMatrix.of([[5, 6], [7, 8]])


@pytest.fixture
def wide() -> LongMatrix:
    """[[1, 2, 3], [4, 5, 6]]"""
    return LongMatrix.of([[1, 2, 3], [4, 5, 6]])


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestMatrixConstruction:
    """Тесты инвариантов конструирования"""

    def test_of_rows(self, wide: LongMatrix) -> None:
        """of() строит матрицу по строкам"""
        assert wide.row_size == 2
        assert wide.column_size == 3
        assert wide.element(2, 3) == 6
        assert wide.elements == (1, 2, 3, 4, 5, 6)

    def test_from_mapping(self, a: LongMatrix) -> None:
        """Конструирование из отображения (row, column) → элемент"""
        assert LongMatrix({(2, 2): 4, (1, 1): 1, (2, 1): 3, (1, 2): 2}) == a

    def test_empty_rejected(self) -> None:
        """Пустой вход вызывает EmptyConstructionError"""
        with pytest.raises(EmptyConstructionError):
            LongMatrix({})
        with pytest.raises(EmptyConstructionError):
            LongMatrix.of([])
        with pytest.raises(EmptyConstructionError):
            LongMatrix.of([[]])

    def test_ragged_rows_rejected(self) -> None:
        """Строки разной длины нарушают инвариант"""
        with pytest.raises(InvariantViolationError):
            LongMatrix.of([[1, 2], [3]])

    def test_missing_cell_rejected(self) -> None:
        """Пропуск ячейки нарушает инвариант"""
        with pytest.raises(InvariantViolationError):
            LongMatrix({(1, 1): 1, (2, 2): 4})

    def test_invalid_key_rejected(self) -> None:
        """Ключ должен быть парой int"""
        with pytest.raises(TypeError):
            LongMatrix({1: 1})  # type: ignore
        with pytest.raises(TypeError):
            LongMatrix({(1, "1"): 1})  # type: ignore

    def test_wrong_element_type_rejected(self) -> None:
        """Элемент не из домена вызывает TypeError"""
        with pytest.raises(TypeError):
            LongMatrix.of([[1, 2.0]])

    def test_identity(self) -> None:
        """Единичная матрица"""
        identity = LongMatrix.identity(3)
        assert identity.is_identity()
        assert identity.trace() == 3
        with pytest.raises(ValueError):
            LongMatrix.identity(0)

    @pytest.mark.parametrize("size", [True, 2.0, "2"])
    def test_identity_size_must_be_int(self, size) -> None:
        """Размер единичной матрицы строго int"""
        with pytest.raises(TypeError, match="size"):
            LongMatrix.identity(size)

    def test_repr(self, a: LongMatrix) -> None:
        """repr показывает тип и таблицу"""
        assert repr(a) == "LongMatrix(table={(1, 1): 1, (1, 2): 2, (2, 1): 3, (2, 2): 4})"


# =============================================================================
# ДОСТУП
# =============================================================================


class TestMatrixAccess:
    """Тесты доступа к элементам, строкам и столбцам"""

    def test_row_and_column_are_vectors(self, wide: LongMatrix) -> None:
        """row() и column() возвращают векторы связанного типа"""
        assert wide.row(1) == LongVector.of(1, 2, 3)
        assert wide.column(3) == LongVector.of(3, 6)

    def test_rows_and_columns_views(self, wide: LongMatrix) -> None:
        """rows / columns — отображения индекс → вектор"""
        assert tuple(wide.rows) == (1, 2)
        assert tuple(wide.columns) == (1, 2, 3)
        assert wide.rows[2] == LongVector.of(4, 5, 6)
        assert wide.columns[1] == LongVector.of(1, 4)

    def test_indices(self, wide: LongMatrix) -> None:
        """Индексы строк и столбцов"""
        assert wide.row_indices == (1, 2)
        assert wide.column_indices == (1, 2, 3)
        assert len(wide.cells) == 6
        assert isinstance(wide.cells, KeysView)
        assert (2, 3) in wide.cells

    def test_entries_row_major(self, a: LongMatrix) -> None:
        """entries в row-major порядке"""
        assert a.entries[1] == MatrixEntry(row=1, column=2, element=2)
        assert a.entry(2, 1) == MatrixEntry(row=2, column=1, element=3)

    @pytest.mark.parametrize("row, column", [(0, 1), (3, 1), (1, 0), (1, 4)])
    def test_out_of_range(self, wide: LongMatrix, row: int, column: int) -> None:
        """Ячейка вне диапазона вызывает IndexOutOfRangeError"""
        with pytest.raises(IndexOutOfRangeError):
            wide.element(row, column)

    def test_row_out_of_range(self, wide: LongMatrix) -> None:
        """row() / column() вне диапазона"""
        with pytest.raises(IndexOutOfRangeError, match="row"):
            wide.row(3)
        with pytest.raises(IndexOutOfRangeError, match="column"):
            wide.column(4)

    def test_contains(self, a: LongMatrix) -> None:
        assert 4 in a
        assert 9 not in a


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestMatrixArithmetic:
    """Тесты арифметики LongMatrix"""

    def test_add(self, a: LongMatrix, b: LongMatrix) -> None:
        assert a.add(b) == LongMatrix.of([[6, 8], [10, 12]])

    def test_subtract(self, a: LongMatrix, b: LongMatrix) -> None:
        assert b.subtract(a) == LongMatrix.of([[4, 4], [4, 4]])

    def test_multiply(self, a: LongMatrix, b: LongMatrix) -> None:
        """[[1,2],[3,4]] · [[5,6],[7,8]] = [[19,22],[43,50]]"""
        assert a.multiply(b) == LongMatrix.of([[19, 22], [43, 50]])

    def test_multiply_rectangular(self, wide: LongMatrix) -> None:
        """(2×3) · (3×2) = (2×2)"""
        product = wide.multiply(wide.transpose())
        assert product == LongMatrix.of([[14, 32], [32, 77]])

    def test_multiply_size_mismatch(self, a: LongMatrix, wide: LongMatrix) -> None:
        """column_size != factor.row_size"""
        with pytest.raises(SizeMismatchError):
            wide.multiply(a)

    def test_multiply_identity(self, a: LongMatrix) -> None:
        """A · I = A"""
        assert a.multiply(LongMatrix.identity(2)) == a

    def test_multiply_vector(self, a: LongMatrix) -> None:
        """[[1,2],[3,4]] · (1, 1) = (3, 7)"""
        assert a.multiply_vector(LongVector.of(1, 1)) == LongVector.of(3, 7)

    def test_multiply_vector_mismatch(self, a: LongMatrix) -> None:
        """Вектор другого размера или домена"""
        with pytest.raises(SizeMismatchError):
            a.multiply_vector(LongVector.of(1, 1, 1))
        with pytest.raises(TypeError):
            a.multiply_vector(DoubleVector.of(1.0, 1.0))

    def test_scalar_multiply_and_negate(self, a: LongMatrix) -> None:
        assert a.scalar_multiply(3) == LongMatrix.of([[3, 6], [9, 12]])
        assert a.negate() == LongMatrix.of([[-1, -2], [-3, -4]])

    def test_transpose(self, wide: LongMatrix) -> None:
        """Транспонирование меняет форму"""
        transposed = wide.transpose()
        assert transposed == LongMatrix.of([[1, 4], [2, 5], [3, 6]])
        assert transposed.transpose() == wide

    def test_shape_mismatch(self, a: LongMatrix, wide: LongMatrix) -> None:
        """add/subtract/equals_by_comparing требуют равной формы"""
        with pytest.raises(SizeMismatchError, match="2x2"):
            a.add(wide)
        with pytest.raises(SizeMismatchError):
            a.subtract(wide)
        with pytest.raises(SizeMismatchError):
            a.equals_by_comparing(wide)

    def test_domain_mismatch(self, a: LongMatrix) -> None:
        with pytest.raises(TypeError):
            a.add(DoubleMatrix.of([[1.0, 2.0], [3.0, 4.0]]))  # type: ignore


# =============================================================================
# СЛЕД, МИНОР, ОПРЕДЕЛИТЕЛЬ
# =============================================================================


class TestDeterminant:
    """Тесты следа, минора и определителя"""

    def test_trace(self, a: LongMatrix) -> None:
        assert a.trace() == 5

    def test_minor(self) -> None:
        """Удаление строки и столбца со сдвигом индексов"""
        m = LongMatrix.of([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert m.minor(2, 2) == LongMatrix.of([[1, 3], [7, 9]])
        assert m.minor(1, 3) == LongMatrix.of([[4, 5], [7, 8]])

    def test_minor_of_single_row_is_empty(self, wide: LongMatrix) -> None:
        """Минор матрицы из одной строки пуст"""
        with pytest.raises(EmptyConstructionError):
            LongMatrix.of([[1, 2]]).minor(1, 1)
        with pytest.raises(IndexOutOfRangeError):
            wide.minor(3, 1)

    def test_determinant_2x2(self, a: LongMatrix) -> None:
        assert a.determinant() == -2

    def test_determinant_3x3(self) -> None:
        m = LongMatrix.of([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.determinant() == -306

    def test_determinant_1x1(self) -> None:
        assert LongMatrix.of([[7]]).determinant() == 7

    def test_determinant_diagonal(self) -> None:
        """Определитель диагональной матрицы — произведение диагонали"""
        m = LongMatrix({(i, j): (i + 1 if i == j else 0) for i in range(1, 5) for j in range(1, 5)})
        assert m.determinant() == 120

    def test_determinant_singular(self) -> None:
        assert LongMatrix.of([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).determinant() == 0

    def test_determinant_stays_integer(self) -> None:
        """Без деления результат остаётся int"""
        result = LongMatrix.of([[2, 1], [7, 4]]).determinant()
        assert result == 1
        assert isinstance(result, int)

    def test_determinant_gaussian(self) -> None:
        """det [[i, 1], [1, i]] = i² - 1 = -2"""
        m = GaussianMatrix.of([[Gaussian.I, Gaussian.ONE], [Gaussian.ONE, Gaussian.I]])
        assert m.determinant() == Gaussian(-2, 0)

    def test_determinant_fraction(self) -> None:
        """det [[1/2, 1/3], [1/4, 1/5]] = 1/60"""
        m = FractionMatrix.of([[Fraction(1, 2), Fraction(1, 3)], [Fraction(1, 4), Fraction(1, 5)]])
        assert m.determinant() == Fraction(1, 60)

    def test_determinant_of_transpose(self) -> None:
        m = LongMatrix.of([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.transpose().determinant() == m.determinant()

    def test_non_square_rejected(self, wide: LongMatrix) -> None:
        """След и определитель только для квадратных матриц"""
        with pytest.raises(NotSquareError):
            wide.trace()
        with pytest.raises(NotSquareError, match="2x3"):
            wide.determinant()


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


class TestMatrixPredicates:
    """Тесты предикатов формы"""

    def test_square(self, a: LongMatrix, wide: LongMatrix) -> None:
        assert a.is_square()
        assert not wide.is_square()

    def test_triangular(self) -> None:
        upper = LongMatrix.of([[1, 2], [0, 3]])
        lower = upper.transpose()
        assert upper.is_upper_triangular()
        assert not upper.is_lower_triangular()
        assert lower.is_lower_triangular()
        assert upper.is_triangular() and lower.is_triangular()
        assert not upper.is_diagonal()

    def test_diagonal_and_identity(self) -> None:
        diagonal = LongMatrix.of([[1, 0], [0, 2]])
        assert diagonal.is_diagonal()
        assert not diagonal.is_identity()
        assert LongMatrix.of([[1, 0], [0, 1]]).is_identity()

    def test_symmetric(self, a: LongMatrix) -> None:
        assert LongMatrix.of([[1, 2], [2, 3]]).is_symmetric()
        assert not a.is_symmetric()

    def test_skew_symmetric(self) -> None:
        assert LongMatrix.of([[0, 2], [-2, 0]]).is_skew_symmetric()
        assert not LongMatrix.of([[1, 2], [-2, 0]]).is_skew_symmetric()

    def test_non_square_predicates_false(self, wide: LongMatrix) -> None:
        """Предикаты квадратных матриц ложны для прямоугольных"""
        assert not wide.is_upper_triangular()
        assert not wide.is_diagonal()
        assert not wide.is_symmetric()
        assert not wide.is_identity()

    def test_double_negative_zero_is_zero(self) -> None:
        """-0.0 ниже диагонали считается нулём"""
        assert DoubleMatrix.of([[1.0, 2.0], [-0.0, 3.0]]).is_upper_triangular()


# =============================================================================
# НОРМЫ
# =============================================================================


class TestMatrixNorms:
    """Тесты норм на [[1, -2], [-3, 4]]"""

    @pytest.fixture
    def m(self) -> LongMatrix:
        return LongMatrix.of([[1, -2], [-3, 4]])

    def test_max_abs_column_sum_norm(self, m: LongMatrix) -> None:
        assert m.max_abs_column_sum_norm() == 6.0

    def test_max_abs_row_sum_norm(self, m: LongMatrix) -> None:
        assert m.max_abs_row_sum_norm() == 7.0

    def test_frobenius(self, m: LongMatrix) -> None:
        result = m.frobenius_norm_pow2()
        assert result == 30
        assert isinstance(result, int)
        assert m.frobenius_norm() == pytest.approx(math.sqrt(30))

    def test_max_norm(self, m: LongMatrix) -> None:
        assert m.max_norm() == 4.0

    def test_gaussian_frobenius(self) -> None:
        """Фробениус над Z[i] — сумма |a_ij|²"""
        m = GaussianMatrix.of([[Gaussian(3, 4)], [Gaussian(0, 1)]])
        assert m.frobenius_norm_pow2() == 26


# =============================================================================
# РАВЕНСТВО
# =============================================================================


class TestMatrixEquality:
    """Тесты равенства матриц"""

    def test_structural_equality(self, a: LongMatrix) -> None:
        assert a == LongMatrix.of([[1, 2], [3, 4]])
        assert hash(a) == hash(LongMatrix.of([[1, 2], [3, 4]]))
        assert a != a.transpose()

    def test_different_shapes_not_equal(self) -> None:
        """Одинаковые элементы, разная форма"""
        assert LongMatrix.of([[1, 2]]) != LongMatrix.of([[1], [2]])

    def test_double_negative_zero(self) -> None:
        x = DoubleMatrix.of([[0.0]])
        y = DoubleMatrix.of([[-0.0]])
        assert x != y
        assert x.equals_by_comparing(y)
        assert not x.does_not_equal_by_comparing(y)
