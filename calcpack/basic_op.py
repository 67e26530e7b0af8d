"""Basic arithmetic on numbers and sequences of numbers."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable

Number = int | float


def total(numbers: Iterable[Number]) -> Number:
    """Sum of ``numbers``; 0 when empty."""
    return sum(numbers)


def product(numbers: Iterable[Number]) -> Number:
    """Product of ``numbers``; 1 when empty."""
    return math.prod(numbers)


def divide(num1: Number, num2: Number) -> Number:
    """Divide ``num1`` by ``num2``.

    Two integers give an integer quotient truncated toward zero.
    """
    if num2 == 0:
        raise ZeroDivisionError("Division by 0 is not accepted.")
    if isinstance(num1, int) and isinstance(num2, int):
        quotient = abs(num1) // abs(num2)
        return quotient if (num1 < 0) == (num2 < 0) else -quotient
    return num1 / num2


def power(number: int, exponent: int) -> int:
    """Raise ``number`` to a non-negative integer ``exponent`` by binary exponentiation."""
    exponent = operator.index(exponent)
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while exponent:
        if exponent & 1:
            result *= number
        number *= number
        exponent >>= 1
    return result