"""
Gaussian — Гауссовы целые числа a + bi (a, b ∈ Z)

Immutable value-объект. Кольцо гауссовых целых не замкнуто относительно
деления: частное возвращается как complex.
"""

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Gaussian:
    """
    Гауссово целое real + imaginary·i.

    Raises:
        TypeError: Если компоненты не int
    """

    real: int
    imaginary: int = 0

    ZERO: ClassVar["Gaussian"]
    ONE: ClassVar["Gaussian"]
    I: ClassVar["Gaussian"]

    def __post_init__(self) -> None:
        for name in ("real", "imaginary"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {value!r}")

    def __add__(self, other: "Gaussian") -> "Gaussian":
        return Gaussian(self.real + other.real, self.imaginary + other.imaginary)

    def __sub__(self, other: "Gaussian") -> "Gaussian":
        return Gaussian(self.real - other.real, self.imaginary - other.imaginary)

    def __mul__(self, other: "Gaussian") -> "Gaussian":
        return Gaussian(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def __truediv__(self, other: "Gaussian") -> complex:
        """Частное в complex (деление не замкнуто в Z[i])"""
        return complex(self) / complex(other)

    def __neg__(self) -> "Gaussian":
        return Gaussian(-self.real, -self.imaginary)

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __abs__(self) -> float:
        return math.hypot(self.real, self.imaginary)

    def conjugate(self) -> "Gaussian":
        return Gaussian(self.real, -self.imaginary)

    def abs_pow2(self) -> int:
        """Норма a² + b² (квадрат модуля, точное целое)"""
        return self.real * self.real + self.imaginary * self.imaginary

    def __str__(self) -> str:
        sign = "-" if self.imaginary < 0 else "+"
        return f"{self.real}{sign}{abs(self.imaginary)}i"


Gaussian.ZERO = Gaussian(0, 0)
Gaussian.ONE = Gaussian(1, 0)
Gaussian.I = Gaussian(0, 1)
