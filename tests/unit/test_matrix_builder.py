"""
Тесты для AbstractMatrixBuilder
"""

from decimal import Decimal

import pytest

from src.linear import (
    BuilderCompletedError,
    DuplicateIndexError,
    EmptyConstructionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    MatrixEntry,
)
from src.linear.domains import (
    BigDecimalMatrixBuilder,
    DoubleMatrix,
    DoubleMatrixBuilder,
    GaussianMatrix,
    GaussianMatrixBuilder,
    LongMatrix,
    LongMatrixBuilder,
)
from src.number import Gaussian


class TestMatrixBuilder:
    """Тесты для AbstractMatrixBuilder"""

    def test_sparse_input_backfilled_with_zero(self) -> None:
        """Незаданные ячейки заполняются нулём домена"""
        matrix = LongMatrixBuilder(2, 3).put(1, 1, 5).put(2, 3, 7).build()
        assert matrix == LongMatrix.of([[5, 0, 0], [0, 0, 7]])

    def test_custom_computation_of_absent(self) -> None:
        """computation_of_absent получает (row, column)"""
        matrix = (
            LongMatrixBuilder(2, 2)
            .with_computation_of_absent(lambda row, column: 10 * row + column)
            .put(1, 1, 0)
            .build()
        )
        assert matrix == LongMatrix.of([[0, 12], [21, 22]])

    def test_identity_via_computation_of_absent(self) -> None:
        """Builder строит единичную матрицу без put() диагонали"""
        builder = LongMatrixBuilder(3, 3).with_computation_of_absent(
            lambda row, column: 1 if row == column else 0
        )
        assert builder.put(1, 1, 1).build() == LongMatrix.identity(3)

    def test_entries_view(self) -> None:
        builder = LongMatrixBuilder(2, 2).put(2, 1, 4)
        assert builder.entries == (MatrixEntry(row=2, column=1, element=4),)

    @pytest.mark.parametrize("rows, columns", [(0, 1), (1, 0), (-1, 2)])
    def test_non_positive_dimensions_rejected(self, rows: int, columns: int) -> None:
        """rows < 1 или columns < 1 вызывает ValueError"""
        with pytest.raises(ValueError, match="must be positive"):
            LongMatrixBuilder(rows, columns)

    @pytest.mark.parametrize("row, column", [(0, 1), (1, 0)])
    def test_non_positive_cell_rejected(self, row: int, column: int) -> None:
        with pytest.raises(IndexOutOfRangeError):
            LongMatrixBuilder(2, 2).put(row, column, 1)

    def test_duplicate_cell_rejected(self) -> None:
        builder = LongMatrixBuilder(2, 2).put(1, 2, 3)
        with pytest.raises(DuplicateIndexError, match=r"\(1, 2\)"):
            builder.put(1, 2, 4)

    def test_empty_build_rejected(self) -> None:
        with pytest.raises(EmptyConstructionError):
            LongMatrixBuilder(2, 2).build()

    def test_row_overflow_rejected(self) -> None:
        with pytest.raises(IndexOverflowError, match="row"):
            LongMatrixBuilder(2, 2).put(3, 1, 1).build()

    def test_column_overflow_rejected(self) -> None:
        with pytest.raises(IndexOverflowError, match="column"):
            LongMatrixBuilder(2, 2).put(1, 3, 1).build()

    def test_wrong_element_type_rejected(self) -> None:
        with pytest.raises(TypeError):
            DoubleMatrixBuilder(1, 1).put(1, 1, 1)

    def test_single_use(self) -> None:
        """Builder нельзя использовать после build()"""
        builder = LongMatrixBuilder(1, 1).put(1, 1, 1)
        builder.build()
        assert builder.completed
        with pytest.raises(BuilderCompletedError):
            builder.build()
        with pytest.raises(BuilderCompletedError):
            builder.put(1, 1, 2)

    def test_domain_defaults(self) -> None:
        """Нули по умолчанию в каждом домене"""
        assert DoubleMatrixBuilder(1, 2).put(1, 2, 1.5).build() == DoubleMatrix.of([[0.0, 1.5]])
        assert GaussianMatrixBuilder(1, 2).put(1, 1, Gaussian.I).build() == GaussianMatrix.of(
            [[Gaussian.I, Gaussian.ZERO]]
        )
        decimal_matrix = BigDecimalMatrixBuilder(2, 1).put(2, 1, Decimal("1.5")).build()
        assert decimal_matrix.elements == (Decimal(0), Decimal("1.5"))
