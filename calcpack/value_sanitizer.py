"""Validation and classification of numeric strings."""

from __future__ import annotations

from enum import IntEnum

NOT_A_NUMBER = "NOT A NUMBER"

_DIGITS = frozenset("0123456789")


class NumberKind(IntEnum):
    """The kind of number a string spells out."""

    INT = 0
    FLOAT = 1
    DOUBLE = 2

    @property
    def description(self) -> str:
        return f"of type {self.name.lower()}"


def _count_points(number: str) -> int | None:
    """Count the decimal points before the last character, after an optional sign.

    Returns None when that part holds anything but digits and at most one point.
    """
    body = number[1:-1] if number.startswith("-") else number[:-1]
    points = 0
    for char in body:
        if char in _DIGITS:
            continue
        if char == "." and points == 0:
            points += 1
            continue
        return None
    return points


def is_number(number: str) -> bool:
    """Tell whether ``number`` is a decimal number, optionally signed and with an ``f`` suffix."""
    if not number or _count_points(number) is None:
        return False
    last = number[-1]
    if last == "f":
        return not number[:-1].endswith(".")
    return last in _DIGITS


class ValueSanitizer:
    """Classifies numeric strings and remembers what it last saw."""

    def __init__(self) -> None:
        self._negative = False
        self._kind: NumberKind | None = None

    def number_type(self, number: str, show_message: bool = False) -> list[str]:
        """Return ``[sign, kind]`` for ``number``, or ``[NOT_A_NUMBER]``.

        ``sign`` is ``"Positive"`` or ``"Negative"``; ``kind`` is the numeric
        value of a :class:`NumberKind` as a string.
        """
        if not number:
            return [NOT_A_NUMBER]

        sign = "Positive"
        if number.startswith("-"):
            self._negative = True
            sign = "Negative"

        points = _count_points(number)
        if points is None:
            return [NOT_A_NUMBER]

        last = number[-1]
        if last != "f" and last not in _DIGITS:
            return [NOT_A_NUMBER]

        if points == 0:
            kind = NumberKind.INT
        elif last == "f":
            kind = NumberKind.FLOAT
        else:
            kind = NumberKind.DOUBLE
        self._kind = kind

        if show_message:
            self._announce(number, kind)

        return [sign, str(kind.value)]

    def number_data(self) -> NumberKind | None:
        """The kind found by the last successful classification, if any."""
        return self._kind

    def _announce(self, number: str, kind: NumberKind) -> None:
        sign = "negative" if self._negative else "positive"
        print(f"The number {number} is {sign}, {kind.description}")