"""
Canonical complexity classes and their reference growth functions.
"""

import math
from enum import Enum
from typing import Callable, Union

# Reference lines saturate here so exponential shapes stay on one chart
GROWTH_CEILING = 1000.0


def _constant(n: int) -> float:
    return 1.0


def _logarithmic(n: int) -> float:
    return math.log2(n) * 10 if n > 0 else 0.0


def _linear(n: int) -> float:
    return float(n)


def _linearithmic(n: int) -> float:
    return n * math.log2(n) / 10 if n > 0 else 0.0


def _quadratic(n: int) -> float:
    return n * n / 10


def _cubic(n: int) -> float:
    return n * n * n / 100


def _exponential(n: int) -> float:
    return 2**n / 10 if n < 15 else GROWTH_CEILING


def _factorial(n: int) -> float:
    # 0! == 1, so n=0 yields 1/10
    return math.factorial(n) / 10 if n < 6 else GROWTH_CEILING


class ComplexityClass(Enum):
    """
    Asymptotic time complexity classes.

    Each member carries its display label, its ordinal level (used to rank how
    expensive a class is), a human readable description, the colour used when
    charting it, and the closed-form function producing its reference curve.
    FACTORIAL is only ever a reference curve; the classifier never emits it.
    """

    CONSTANT = ("O(1)", 1, "Constant Time", "#00ff00", _constant)
    LOGARITHMIC = ("O(log n)", 2, "Logarithmic Time", "#ff8800", _logarithmic)
    LINEAR = ("O(n)", 3, "Linear Time", "#88ff00", _linear)
    LINEARITHMIC = ("O(n log n)", 3.5, "Linearithmic Time", "#ffffff", _linearithmic)
    QUADRATIC = ("O(n²)", 4, "Quadratic Time", "#00aa88", _quadratic)
    CUBIC = ("O(n³)", 5, "Cubic Time", "#ff00aa", _cubic)
    EXPONENTIAL = ("O(2^n)", 6, "Exponential Time", "#00aaff", _exponential)
    FACTORIAL = ("O(n!)", 7, "Factorial Time", "#aa5500", _factorial)

    def __new__(
        cls,
        label: str,
        level: Union[int, float],
        description: str,
        color: str,
        generator: Callable[[int], float],
    ):
        obj = object.__new__(cls)
        obj._value_ = label
        obj.label = label
        obj.level = level
        obj.description = description
        obj.color = color
        obj._generator = generator
        return obj

    def __str__(self) -> str:
        return self.label

    def operations(self, n: int) -> float:
        """Reference operation count for an input of size n."""
        return self._generator(n)

    @property
    def is_reference_only(self) -> bool:
        return self is ComplexityClass.FACTORIAL

    @classmethod
    def from_label(cls, label: str) -> "ComplexityClass":
        """Resolve a label such as 'O(n log n)' to its class."""
        normalized = label.strip().replace("^2", "²").replace("^3", "³")
        for member in cls:
            if member.label == normalized:
                return member
        raise ValueError(f"Unknown complexity class: '{label}'")

    @classmethod
    def outcomes(cls):
        """Classes the classifier can produce, ordered by level."""
        return tuple(member for member in cls if not member.is_reference_only)
