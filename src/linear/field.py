"""
Field / QuotientField — Алгебраические абстракции числовых доменов

Field описывает, что означает арифметика для домена E: сложение, вычитание,
умножение, деление (результат может лежать в другом, замкнутом относительно
деления домене Q) и аддитивная единица.

QuotientField расширяет Field:
- embed: E → Q (проекция в домен с делением)
- фабрики vector_of / matrix_of для связанных типов вектора и матрицы
- скалярные примитивы норм домена (|e| в N, |e|² в P, sqrt: P → N)
- сравнение по значению и структурный ключ элемента
- кодирование элементов в JSON payload

Благодаря этому обобщённые алгоритмы векторов и матриц определены один раз,
а каждый домен — тонкая реализация QuotientField.

ИНВАРИАНТЫ:
1. Field не хранит изменяемого состояния (безопасно разделять глобально)
2. Операции тотальны на домене; деление на ноль — ответственность
   вызывающего кода, исключение домена пробрасывается как есть
"""

import operator
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

E = TypeVar("E")
Q = TypeVar("Q")
N = TypeVar("N")
P = TypeVar("P")


# =============================================================================
# FIELD
# =============================================================================


class Field(ABC, Generic[E, Q]):
    """
    Набор из четырёх бинарных операций и нуля над доменом E.

    Экземпляры без состояния: любые два экземпляра одного класса
    (с одинаковой конфигурацией) равны.
    """

    @abstractmethod
    def add(self, a: E, b: E) -> E:
        """Сумма a + b"""

    @abstractmethod
    def subtract(self, a: E, b: E) -> E:
        """Разность a - b"""

    @abstractmethod
    def multiply(self, a: E, b: E) -> E:
        """Произведение a * b"""

    @abstractmethod
    def divide(self, a: E, b: E) -> Q:
        """Частное a / b в домене Q"""

    @property
    @abstractmethod
    def zero(self) -> E:
        """Аддитивная единица"""

    @property
    @abstractmethod
    def one(self) -> E:
        """Мультипликативная единица"""

    def negate(self, a: E) -> E:
        return self.subtract(self.zero, a)

    def sum(self, values: Iterable[E]) -> E:
        """
        Левая свёртка add в порядке итерации.

        Порядок детерминирован, поэтому одинаковые входы дают одинаковый
        результат и для неточных доменов. Пустой вход → zero.
        """
        result = None
        for value in values:
            result = value if result is None else self.add(result, value)
        return self.zero if result is None else result

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# QUOTIENT FIELD
# =============================================================================


class QuotientField(Field[E, Q], Generic[E, Q, N, P]):
    """
    Field с вложением в домен с делением и фабриками векторов/матриц.

    Подклассы обязаны задать:
        name: тег домена для JSON payload
        element_types: допустимые Python-типы элементов
        embed, absolute, sqrt, vector_of, matrix_of, encode, decode
    """

    name: ClassVar[str]
    element_types: ClassVar[tuple[type, ...]]
    element_schema: ClassVar[dict[str, Any]] = {}

    # -------------------------------------------------------------------------
    # Вложение и фабрики
    # -------------------------------------------------------------------------

    @abstractmethod
    def embed(self, a: E) -> Q:
        """Проекция элемента E в домен с делением Q"""

    @abstractmethod
    def vector_of(self, index_to_element: Mapping[int, E]) -> Any:
        """Вектор связанного типа из полного отображения индекс → элемент"""

    @abstractmethod
    def matrix_of(self, cell_to_element: Mapping[tuple[int, int], E]) -> Any:
        """Матрица связанного типа из полного отображения (row, column) → элемент"""

    # -------------------------------------------------------------------------
    # Скалярные примитивы норм
    # -------------------------------------------------------------------------

    @abstractmethod
    def absolute(self, a: E) -> N:
        """Абсолютное значение |a| в домене норм N"""

    @abstractmethod
    def sqrt(self, p: P) -> N:
        """Квадратный корень из значения скалярного произведения"""

    def norm_add(self, a: N, b: N) -> N:
        """Сложение в домене норм N"""
        return operator.add(a, b)

    def abs_pow2(self, a: E) -> P:
        """Квадрат модуля |a|² в домене скалярного произведения P"""
        return self.multiply(a, self.conjugate(a))

    def inner_add(self, a: P, b: P) -> P:
        """Сложение в домене скалярного произведения P"""
        return self.add(a, b)

    def conjugate(self, a: E) -> E:
        """Сопряжение; для вещественных доменов — тождество"""
        return a

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equal_by_comparing(self, a: E, b: E) -> bool:
        """Равенство по значению (для точных доменов совпадает с ==)"""
        return a == b

    def structural_key(self, a: E) -> Any:
        """Ключ структурного равенства и хэширования"""
        return a

    # -------------------------------------------------------------------------
    # Валидация и кодирование элементов
    # -------------------------------------------------------------------------

    def is_element(self, a: Any) -> bool:
        return isinstance(a, self.element_types) and not isinstance(a, bool)

    def check_element(self, a: Any) -> None:
        """
        Проверка типа элемента.

        Raises:
            TypeError: Если элемент не принадлежит домену
        """
        if not self.is_element(a):
            expected = ", ".join(t.__name__ for t in self.element_types)
            raise TypeError(
                f"expected element of type {expected} for domain '{self.name}' "
                f"but got {type(a).__name__}: {a!r}"
            )

    @abstractmethod
    def encode(self, a: E) -> Any:
        """Кодирование элемента в JSON-совместимое значение"""

    @abstractmethod
    def decode(self, raw: Any) -> E:
        """Декодирование элемента из JSON-совместимого значения"""
