"""
AbstractVector — Обобщённый immutable вектор над числовым доменом

Вектор хранит отображение индекс → элемент с плотным 1-based множеством
индексов. Вся арифметика и нормы выражены один раз через QuotientField
конкретного домена; подкласс домена лишь связывает свой field.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отображение никогда не пустое
2. Множество индексов строго {1, ..., size}
3. size выводится из отображения и нигде не хранится отдельно
4. Любая операция возвращает новый вектор, получатель не изменяется
5. Расстояние всегда равно норме разности (не реализуется отдельно)
"""

from abc import ABC
from collections.abc import KeysView, Mapping
from dataclasses import dataclass
from functools import cached_property, reduce
from types import MappingProxyType
from typing import Any, ClassVar, Generic, TypeVar

from src.linear.entry import VectorEntry
from src.linear.errors import (
    EmptyConstructionError,
    InvariantViolationError,
    require_equal_sizes,
    require_index_in_range,
)
from src.linear.field import QuotientField

E = TypeVar("E")
N = TypeVar("N")
P = TypeVar("P")

V = TypeVar("V", bound="AbstractVector")


@dataclass(frozen=True, eq=False, repr=False)
class AbstractVector(ABC, Generic[E, N, P]):
    """
    Базовый класс векторов.

    Type parameters:
        E: тип элементов
        N: тип такси-нормы, евклидовой и max-нормы
        P: тип скалярного квадрата (euclidean_norm_pow2)

    Raises:
        EmptyConstructionError: Если отображение пустое
        InvariantViolationError: Если индексы не равны {1..size}
        TypeError: Если индекс не int или элемент не из домена
    """

    index_to_element: Mapping[int, E]

    field: ClassVar[QuotientField]

    def __post_init__(self) -> None:
        if not isinstance(self.index_to_element, Mapping):
            raise TypeError(
                f"expected a mapping of index to element but got "
                f"{type(self.index_to_element).__name__}"
            )
        if not self.index_to_element:
            raise EmptyConstructionError(
                "expected a non-empty mapping but the mapping is empty"
            )
        for index, element in self.index_to_element.items():
            if not isinstance(index, int) or isinstance(index, bool):
                raise TypeError(f"expected int index but got {index!r}")
            self.field.check_element(element)

        indices = set(self.index_to_element)
        expected = set(range(1, len(indices) + 1))
        if indices != expected:
            raise InvariantViolationError(
                f"expected indices == {sorted(expected)} but indices = {sorted(indices)}"
            )

        frozen = MappingProxyType(dict(sorted(self.index_to_element.items())))
        object.__setattr__(self, "index_to_element", frozen)

    @classmethod
    def of(cls: type[V], *elements: Any) -> V:
        """Вектор из элементов по порядку: первый элемент получает индекс 1."""
        return cls(dict(enumerate(elements, start=1)))

    # =========================================================================
    # ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    @property
    def size(self) -> int:
        return len(self.index_to_element)

    @cached_property
    def indices(self) -> KeysView[int]:
        """Индексы по возрастанию (set-like view)"""
        return self.index_to_element.keys()

    @cached_property
    def elements(self) -> tuple[E, ...]:
        """Элементы в порядке индексов"""
        return tuple(self.index_to_element.values())

    @cached_property
    def entries(self) -> tuple[VectorEntry, ...]:
        """Элементы с индексами в порядке индексов"""
        return tuple(
            VectorEntry(index=index, element=element)
            for index, element in self.index_to_element.items()
        )

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self: V, summand: V) -> V:
        """
        Сумма this + summand.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(summand)
        return self._derive(
            {i: self.field.add(e, summand.element(i)) for i, e in self.index_to_element.items()}
        )

    def subtract(self: V, subtrahend: V) -> V:
        """
        Разность this - subtrahend.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(subtrahend)
        return self._derive(
            {
                i: self.field.subtract(e, subtrahend.element(i))
                for i, e in self.index_to_element.items()
            }
        )

    def dot_product(self: V, other: V) -> E:
        """
        Скалярное произведение Σ this_i * conj(other_i).

        Суммирование строго по возрастанию индексов.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(other)
        field = self.field
        return field.sum(
            field.multiply(e, field.conjugate(other.element(i)))
            for i, e in self.index_to_element.items()
        )

    def scalar_multiply(self: V, scalar: E) -> V:
        self.field.check_element(scalar)
        return self._derive(
            {i: self.field.multiply(scalar, e) for i, e in self.index_to_element.items()}
        )

    def negate(self: V) -> V:
        return self._derive({i: self.field.negate(e) for i, e in self.index_to_element.items()})

    def orthogonal_to(self: V, other: V) -> bool:
        """
        Ортогональность: скалярное произведение равно нулю домена.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        return self.field.equal_by_comparing(self.dot_product(other), self.field.zero)

    # =========================================================================
    # НОРМЫ И РАССТОЯНИЯ
    # =========================================================================

    def taxicab_norm(self) -> N:
        """Сумма модулей элементов"""
        return reduce(self.field.norm_add, map(self.field.absolute, self.elements))

    def euclidean_norm_pow2(self) -> P:
        """Сумма квадратов модулей элементов"""
        return reduce(self.field.inner_add, map(self.field.abs_pow2, self.elements))

    def euclidean_norm(self) -> N:
        return self.field.sqrt(self.euclidean_norm_pow2())

    def max_norm(self) -> N:
        """Максимальный модуль элемента"""
        return max(map(self.field.absolute, self.elements))

    def euclidean_distance(self: V, other: V) -> N:
        """
        Евклидово расстояние: euclidean_norm(this - other).

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(other)
        return self.subtract(other).euclidean_norm()

    def max_distance(self: V, other: V) -> N:
        """
        Расстояние по max-норме: max_norm(this - other).

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(other)
        return self.subtract(other).max_norm()

    # =========================================================================
    # ДОСТУП К ЭЛЕМЕНТАМ
    # =========================================================================

    def element(self, index: int) -> E:
        """
        Элемент по индексу.

        Raises:
            IndexOutOfRangeError: Если index вне 1..size
        """
        require_index_in_range(index, self.size)
        return self.index_to_element[index]

    def entry(self, index: int) -> VectorEntry:
        """
        VectorEntry по индексу.

        Raises:
            IndexOutOfRangeError: Если index вне 1..size
        """
        return VectorEntry(index=index, element=self.element(index))

    def contains(self, element: E) -> bool:
        return element in self.elements

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self.size

    # =========================================================================
    # РАВЕНСТВО
    # =========================================================================

    def equals_by_comparing(self: V, other: V) -> bool:
        """
        Равенство по значению: все пары элементов равны при сравнении домена.

        В отличие от ==, не учитывает представление (например, Decimal("1.0")
        и Decimal("1.00"), или 0.0 и -0.0).

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        self._require_compatible(other)
        return all(
            self.field.equal_by_comparing(e, other.element(i))
            for i, e in self.index_to_element.items()
        )

    def does_not_equal_by_comparing(self: V, other: V) -> bool:
        return not self.equals_by_comparing(other)

    def _structural_keys(self) -> tuple:
        return tuple(self.field.structural_key(e) for e in self.elements)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self._structural_keys() == other._structural_keys()

    def __hash__(self) -> int:
        return hash((type(self), self._structural_keys()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(map={dict(self.index_to_element)!r})"

    # =========================================================================
    # ВНУТРЕННИЕ ХЕЛПЕРЫ
    # =========================================================================

    def _require_compatible(self, other: "AbstractVector") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__} but got {type(other).__name__}"
            )
        require_equal_sizes(self.size, other.size)

    def _derive(self: V, index_to_element: Mapping[int, E]) -> V:
        return self.field.vector_of(index_to_element)
