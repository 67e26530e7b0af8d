"""Formatting helpers for floating point numbers and numeric strings."""

from __future__ import annotations

import math
import struct

from .value_sanitizer import NOT_A_NUMBER, is_number

DOUBLE_MAX_DIGITS = 15
FLOAT_MAX_DIGITS = 7


def _cut(text: str, digits: int) -> str:
    whole, dot, fraction = text.partition(".")
    if not dot:
        return text + "0" * digits
    kept = fraction[:digits]
    result = f"{whole}.{kept}{'0' * (digits - len(kept))}"
    return result[:-1] if result.endswith(".") else result


def _check_digits(digits: int, limit: int) -> int:
    if digits < 0:
        raise ValueError("digits must not be negative")
    if digits > limit:
        print(f"Double values will be rounded to maximum {limit} digits.")
        return limit
    return digits


def _to_single(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def trim(number: float, digits: int) -> str:
    """Show ``number`` with exactly ``digits`` decimals, cut rather than rounded.

    The number is first written with six decimals; more than 15 digits are capped.
    """
    digits = _check_digits(digits, DOUBLE_MAX_DIGITS)
    return _cut(f"{number:f}", digits)


def trim_float(number: float, digits: int) -> str:
    """Like :func:`trim` for a single-precision value; more than 7 digits are capped."""
    digits = _check_digits(digits, FLOAT_MAX_DIGITS)
    return _cut(f"{_to_single(number):f}", digits)


def parts(number: str) -> list[str]:
    """Split a numeric string into ``[whole, fractional]``.

    The fractional part keeps the sign and reads like ``"-0.25"``; a
    string that is not a number gives ``[NOT_A_NUMBER]``.
    """
    if not is_number(number):
        return [NOT_A_NUMBER]
    whole, dot, fraction = number.partition(".")
    sign = "-" if number.startswith("-") else ""
    fractional = f"{sign}0{dot}{fraction}" if dot else f"{sign}0.0"
    if fractional.endswith("f"):
        fractional = fractional[:-1]
    return [whole, fractional]