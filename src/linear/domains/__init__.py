"""
Concrete numeric domains — Представительные реализации QuotientField

Каждый домен — тонкая реализация QuotientField плюс типы вектора, матрицы
и builder'ов, связанные с ним:
- long: int (частное и нормы во float)
- double: float
- big_decimal: decimal.Decimal с настраиваемой точностью
- rational: fractions.Fraction
- gaussian: гауссовы целые Z[i]
"""

from src.linear.domains.big_decimal import (
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_DECIMAL_ROUNDING,
    BigDecimalField,
    BigDecimalMatrix,
    BigDecimalMatrixBuilder,
    BigDecimalVector,
    BigDecimalVectorBuilder,
    DecimalConfig,
    DecimalTypes,
    decimal_types,
)
from src.linear.domains.double import (
    DoubleField,
    DoubleMatrix,
    DoubleMatrixBuilder,
    DoubleVector,
    DoubleVectorBuilder,
)
from src.linear.domains.gaussian import (
    GaussianField,
    GaussianMatrix,
    GaussianMatrixBuilder,
    GaussianVector,
    GaussianVectorBuilder,
)
from src.linear.domains.long import (
    LongField,
    LongMatrix,
    LongMatrixBuilder,
    LongVector,
    LongVectorBuilder,
)
from src.linear.domains.rational import (
    FractionField,
    FractionMatrix,
    FractionMatrixBuilder,
    FractionVector,
    FractionVectorBuilder,
)

__all__ = [
    # Long
    "LongField",
    "LongVector",
    "LongMatrix",
    "LongVectorBuilder",
    "LongMatrixBuilder",
    # Double
    "DoubleField",
    "DoubleVector",
    "DoubleMatrix",
    "DoubleVectorBuilder",
    "DoubleMatrixBuilder",
    # BigDecimal
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_DECIMAL_ROUNDING",
    "DecimalConfig",
    "DecimalTypes",
    "decimal_types",
    "BigDecimalField",
    "BigDecimalVector",
    "BigDecimalMatrix",
    "BigDecimalVectorBuilder",
    "BigDecimalMatrixBuilder",
    # Rational
    "FractionField",
    "FractionVector",
    "FractionMatrix",
    "FractionVectorBuilder",
    "FractionMatrixBuilder",
    # Gaussian
    "GaussianField",
    "GaussianVector",
    "GaussianMatrix",
    "GaussianVectorBuilder",
    "GaussianMatrixBuilder",
]
