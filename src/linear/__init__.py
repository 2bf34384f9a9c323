"""
Linear algebra value types.

Immutable векторы и матрицы над взаимозаменяемыми числовыми доменами,
построенные на абстракции Field / QuotientField, и builder'ы для их
инкрементальной сборки.
"""

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.entry import MatrixEntry, VectorEntry
from src.linear.errors import (
    BuilderCompletedError,
    DuplicateIndexError,
    EmptyConstructionError,
    IndexOutOfRangeError,
    IndexOverflowError,
    InvariantViolationError,
    LinearAlgebraError,
    NotSquareError,
    SizeMismatchError,
)
from src.linear.field import Field, QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector

__all__ = [
    # Entries
    "VectorEntry",
    "MatrixEntry",
    # Algebra
    "Field",
    "QuotientField",
    # Values
    "AbstractVector",
    "AbstractMatrix",
    # Builders
    "AbstractVectorBuilder",
    "AbstractMatrixBuilder",
    # Errors
    "LinearAlgebraError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "EmptyConstructionError",
    "IndexOverflowError",
    "DuplicateIndexError",
    "InvariantViolationError",
    "NotSquareError",
    "BuilderCompletedError",
]
