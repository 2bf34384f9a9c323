"""
Errors — Таксономия ошибок линейной алгебры

Все ошибки являются нарушениями предусловий (ошибки вызывающего кода),
а не восстанавливаемыми runtime-сбоями. Они поднимаются синхронно в точке
нарушения, никогда не логируются и не повторяются внутри библиотеки.

Каждая ошибка наследует LinearAlgebraError и соответствующее встроенное
исключение, поэтому вызывающий код может ловить как `ValueError`, так и
конкретный тип.
"""


class LinearAlgebraError(Exception):
    """Базовый класс всех ошибок библиотеки."""


class SizeMismatchError(LinearAlgebraError, ValueError):
    """Размеры операндов бинарной операции не совпадают."""


class IndexOutOfRangeError(LinearAlgebraError, IndexError):
    """Запрошенный индекс вне диапазона 1..size."""


class EmptyConstructionError(LinearAlgebraError, ValueError):
    """Вектор или матрица строится из пустого набора элементов."""


class IndexOverflowError(LinearAlgebraError, ValueError):
    """Максимальный индекс builder'а превышает объявленный размер."""


class DuplicateIndexError(LinearAlgebraError, ValueError):
    """Два элемента претендуют на один и тот же индекс."""


class InvariantViolationError(LinearAlgebraError, ValueError):
    """
    Множество индексов не совпадает с плотным множеством {1..size}.

    Для матриц — с декартовым произведением {1..rows} × {1..columns}.
    """


class NotSquareError(LinearAlgebraError, ValueError):
    """Операция определена только для квадратных матриц."""


class BuilderCompletedError(LinearAlgebraError, RuntimeError):
    """Builder уже завершён вызовом build() и не может быть переиспользован."""


# =============================================================================
# ХЕЛПЕРЫ ПРОВЕРОК
# =============================================================================


def require_equal_sizes(size: int, other_size: int) -> None:
    """
    Проверка совпадения размеров двух операндов.

    Raises:
        SizeMismatchError: Если размеры различаются
    """
    if size != other_size:
        raise SizeMismatchError(f"expected equal sizes but {size} != {other_size}")


def require_index_in_range(index: int, size: int, name: str = "index") -> None:
    """
    Проверка, что индекс лежит в 1..size.

    Raises:
        IndexOutOfRangeError: Если index < 1 или index > size
    """
    if not 1 <= index <= size:
        raise IndexOutOfRangeError(f"expected {name} in 1..{size} but {name} = {index}")


def require_dimension(value: object, name: str) -> int:
    """
    Проверка размерности: int (не bool) и >= 1.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 1
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value
