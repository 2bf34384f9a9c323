"""
BigDecimal domain — Векторы и матрицы над decimal.Decimal

E = Q = N = P = Decimal

Вся арифметика выполняется в явном decimal.Context, собранном из
DecimalConfig; глобальный (thread-local) контекст не изменяется.

Сравнение по значению: Decimal("1.0") и Decimal("1.00") равны.
Структурное равенство учитывает экспоненту (Decimal.as_tuple()),
поэтому такие представления структурно различны.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
)
from functools import lru_cache
from typing import Any, Final, NamedTuple, Optional

from src.linear.builder import AbstractMatrixBuilder, AbstractVectorBuilder
from src.linear.field import QuotientField
from src.linear.matrix import AbstractMatrix
from src.linear.vector import AbstractVector

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Точность по умолчанию (34 значащих цифры, как IEEE 754 decimal128)
DEFAULT_DECIMAL_PRECISION: Final[int] = 34

# Банковское округление по умолчанию
DEFAULT_DECIMAL_ROUNDING: Final[str] = ROUND_HALF_EVEN

_ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        ROUND_05UP,
        ROUND_CEILING,
        ROUND_DOWN,
        ROUND_FLOOR,
        ROUND_HALF_DOWN,
        ROUND_HALF_EVEN,
        ROUND_HALF_UP,
        ROUND_UP,
    }
)

# Десятичное число в строковой записи (без NaN/Infinity)
DECIMAL_PATTERN: Final[str] = r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$"


@dataclass(frozen=True)
class DecimalConfig:
    """
    Конфигурация десятичной арифметики.

    Attributes:
        precision: количество значащих цифр (>= 1)
        rounding: режим округления из модуля decimal
    """

    precision: int = DEFAULT_DECIMAL_PRECISION
    rounding: str = DEFAULT_DECIMAL_ROUNDING

    def __post_init__(self) -> None:
        if not isinstance(self.precision, int) or self.precision < 1:
            raise ValueError(f"precision must be a positive int, got {self.precision!r}")
        if self.rounding not in _ROUNDING_MODES:
            raise ValueError(f"unknown rounding mode: {self.rounding!r}")

    def context(self) -> Context:
        return Context(prec=self.precision, rounding=self.rounding)


# =============================================================================
# FIELD
# =============================================================================


class BigDecimalField(QuotientField[Decimal, Decimal, Decimal, Decimal]):
    """Поле Decimal с явным контекстом точности и округления"""

    name = "big_decimal"
    element_types = (Decimal,)
    element_schema = {"type": "string", "pattern": DECIMAL_PATTERN}

    def __init__(self, config: Optional[DecimalConfig] = None) -> None:
        self.config = config or DecimalConfig()
        self._context = self.config.context()

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.add(a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.multiply(a, b)

    def divide(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.divide(a, b)

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def negate(self, a: Decimal) -> Decimal:
        return self._context.minus(a)

    def embed(self, a: Decimal) -> Decimal:
        return a

    def absolute(self, a: Decimal) -> Decimal:
        return self._context.abs(a)

    def norm_add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._context.add(a, b)

    def sqrt(self, p: Decimal) -> Decimal:
        return self._context.sqrt(p)

    def is_element(self, a: Any) -> bool:
        """Только конечные значения: NaN и Infinity не являются элементами"""
        return super().is_element(a) and a.is_finite()

    def structural_key(self, a: Decimal) -> Any:
        return a.as_tuple()

    def vector_of(self, index_to_element: Mapping[int, Decimal]) -> "BigDecimalVector":
        return decimal_types(self.config).vector(index_to_element)

    def matrix_of(
        self, cell_to_element: Mapping[tuple[int, int], Decimal]
    ) -> "BigDecimalMatrix":
        return decimal_types(self.config).matrix(cell_to_element)

    def encode(self, a: Decimal) -> str:
        return str(a)

    def decode(self, raw: Any) -> Decimal:
        return Decimal(raw)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.config == other.config

    def __hash__(self) -> int:
        return hash((type(self), self.config))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self.config!r})"


class BigDecimalVector(AbstractVector[Decimal, Decimal, Decimal]):
    field = BigDecimalField()


class BigDecimalMatrix(AbstractMatrix[Decimal, Decimal, Decimal]):
    field = BigDecimalField()


class BigDecimalVectorBuilder(AbstractVectorBuilder[Decimal, BigDecimalVector]):
    field = BigDecimalField()


class BigDecimalMatrixBuilder(AbstractMatrixBuilder[Decimal, BigDecimalMatrix]):
    field = BigDecimalField()


# =============================================================================
# ТИПЫ ДЛЯ КОНФИГУРАЦИИ
# =============================================================================


class DecimalTypes(NamedTuple):
    """Вектор, матрица и builder'ы, связанные с одним BigDecimalField"""

    field: BigDecimalField
    vector: type[BigDecimalVector]
    matrix: type[BigDecimalMatrix]
    vector_builder: type[BigDecimalVectorBuilder]
    matrix_builder: type[BigDecimalMatrixBuilder]


@lru_cache(maxsize=None)
def decimal_types(config: DecimalConfig) -> DecimalTypes:
    """
    Семейство типов для заданной конфигурации.

    Для конфигурации по умолчанию возвращает BigDecimalVector и соседей.
    Для любой другой строит подклассы с полем этой конфигурации, так что
    результаты операций сохраняют точность и округление. Одинаковые
    конфигурации разделяют одно семейство, поэтому их векторы совместимы.

    Example:
        >>> types = decimal_types(DecimalConfig(precision=3))
        >>> types.vector.of(Decimal("1.234")).add(types.vector.of(Decimal("1.234")))
        BigDecimalVector(map={1: Decimal('2.47')})
    """
    if config == BigDecimalVector.field.config:
        return DecimalTypes(
            BigDecimalVector.field,
            BigDecimalVector,
            BigDecimalMatrix,
            BigDecimalVectorBuilder,
            BigDecimalMatrixBuilder,
        )

    field = BigDecimalField(config)
    namespace = {"field": field, "__module__": __name__}
    return DecimalTypes(
        field,
        type("BigDecimalVector", (BigDecimalVector,), dict(namespace)),
        type("BigDecimalMatrix", (BigDecimalMatrix,), dict(namespace)),
        type("BigDecimalVectorBuilder", (BigDecimalVectorBuilder,), dict(namespace)),
        type("BigDecimalMatrixBuilder", (BigDecimalMatrixBuilder,), dict(namespace)),
    )
