"""Collecting assertions that record failures instead of raising."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .numeric_utils import DOUBLE_MAX_DIGITS, trim

RULE = "-" * 50


class CheckSuite(ABC):
    """Base for a suite of checks that gathers failure messages as it goes."""

    label = "checks"

    def __init__(self) -> None:
        self._errors: list[str] = []

    @property
    def errors(self) -> list[str]:
        """The failure messages recorded so far, oldest first."""
        return list(self._errors)

    def assert_equal(
        self, test_name: str, actual: Any, expected: Any, digits: int | None = None
    ) -> bool:
        """Compare ``actual`` with ``expected`` and record a message on mismatch.

        With ``digits`` the values are compared as floating point numbers cut
        to that many decimals. Sequences are compared element by element.
        """
        if digits is not None:
            return self._equal_numbers(test_name, actual, expected, digits)
        if isinstance(actual, (list, tuple)) and isinstance(expected, (list, tuple)):
            return self._equal_sequences(test_name, actual, expected)
        if actual == expected:
            return True
        self._errors.append(f"Test {test_name} failed. Expected {expected}, but got {actual}")
        return False

    def assert_true(self, test_name: str, value: bool) -> bool:
        """Record a message unless ``value`` is true; return whether it is."""
        if not value:
            self._errors.append(f"Test {test_name} resulted in false. Expected true.")
        return bool(value)

    def assert_false(self, test_name: str, value: bool) -> bool:
        """Record a message unless ``value`` is false; return whether it is."""
        if value:
            self._errors.append(f"Test {test_name} resulted in true. Expected false.")
        return not value

    def print_errors(self) -> None:
        """Print every recorded failure between two rules."""
        print(RULE)
        for error in self._errors:
            print(f"[FAIL]:\t{error}")
        print(RULE)

    @abstractmethod
    def run(self) -> bool:
        """Run the suite's checks and report; return whether all passed."""

    def _report(self, passed: bool) -> bool:
        if passed:
            print(f"All tests passed for {self.label}.")
        else:
            print("Some tests have failed.")
            print("Error list: ")
            self.print_errors()
        return passed

    def _equal_numbers(
        self, test_name: str, actual: float, expected: float, digits: int
    ) -> bool:
        if trim(actual, digits) == trim(expected, digits):
            return True
        precision = min(digits, DOUBLE_MAX_DIGITS)
        self._errors.append(
            f"Test {test_name} failed. Expected {expected:.{precision}f}, "
            f"but got {actual:.{precision}f}"
        )
        return False

    def _equal_sequences(
        self, test_name: str, actual: Sequence[Any], expected: Sequence[Any]
    ) -> bool:
        if len(actual) != len(expected):
            self._errors.append(
                f"Test {test_name} failed. Size of actual ({len(actual)}) "
                f"and expected ({len(expected)}) incompatible."
            )
            return False
        matched = True
        for index, (got, wanted) in enumerate(zip(actual, expected)):
            if got != wanted:
                matched = False
                self._errors.append(
                    f"Test {test_name} failed. Expected {wanted}, but got {got} "
                    f"at index = {index}"
                )
        return matched