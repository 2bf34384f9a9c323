"""
Number types — Числовые домены, отсутствующие в стандартной библиотеке.
"""

from src.number.gaussian import Gaussian

__all__ = [
    "Gaussian",
]
