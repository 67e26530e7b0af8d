"""Self-checking suites for the calculator and the command that runs them."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .basic_op import divide, power, total
from .checks import CheckSuite
from .numeric_utils import parts, trim
from .value_sanitizer import NOT_A_NUMBER, NumberKind, ValueSanitizer, is_number


def _rejects_division(num1: int, num2: int) -> bool:
    try:
        divide(num1, num2)
    except ZeroDivisionError:
        return True
    return False


class OperationSuite(CheckSuite):
    """Checks of the basic arithmetic operations."""

    label = "Operations"

    def run(self) -> bool:
        checks = (
            lambda: self.assert_equal("[INTEGER SUM TEST, (int)total]", total([2, 3, 4]), 9),
            lambda: self.assert_equal("[INTEGER SUBTRACT TEST, (int)total]", total([2, -3, 4]), 3),
            lambda: self.assert_equal(
                "[FLOAT SUM TEST, (float)total]", total([2.0, 3.0, 4.5]), 9.5, 1
            ),
            lambda: self.assert_equal(
                "[FLOAT SUBTRACT TEST, (float)total]", total([2.33, -3.21, 4.5]), 3.62, 2
            ),
            lambda: self.assert_true(
                "[INTEGER DIV TEST (1), (int)divide]", _rejects_division(2, 0)
            ),
            lambda: self.assert_equal("[INTEGER DIV TEST (2), (int)divide]", divide(5, 2), 2),
            lambda: self.assert_equal("[INTEGER POW TEST, (int)power]", power(2, 4), 16),
        )
        return self._report(all(check() for check in checks))


class FormattingSuite(CheckSuite):
    """Checks of number formatting and numeric string validation."""

    label = "Formatting"

    def __init__(self) -> None:
        super().__init__()
        self._sanitizer = ValueSanitizer()

    def run(self) -> bool:
        passed = self.numeric_utils_checks() and self.value_sanitizer_checks()
        return self._report(passed)

    def numeric_utils_checks(self) -> bool:
        """Check :func:`trim` and :func:`parts`."""
        checks = (
            lambda: self.assert_equal("[DOUBLE ROUND TEST (1), trim]", trim(2.52, 1), "2.5"),
            lambda: self.assert_equal(
                "[DOUBLE ROUND TEST (2), trim]", trim(3.1441414141, 2), "3.14"
            ),
            lambda: self.assert_equal("[DOUBLE ROUND TEST (3), trim]", trim(15.292930291, 0), "15"),
            lambda: self.assert_equal(
                "[DOUBLE ROUND TEST (4), trim]", trim(3.4, 15), "3.400000000000000"
            ),
            lambda: self.assert_equal(
                "[DOUBLE ROUND TEST (5), trim]", trim(-3.619999, 5), "-3.61999"
            ),
            lambda: self.assert_equal(
                "[PART TEST (1), parts]", parts("-3.9929"), ["-3", "-0.9929"]
            ),
            lambda: self.assert_equal("[PART TEST (2), parts]", parts("1.abb3"), [NOT_A_NUMBER]),
            lambda: self.assert_equal("[PART TEST (3), parts]", parts("0.03f"), ["0", "0.03"]),
            lambda: self.assert_equal("[PART TEST (4), parts]", parts("75"), ["75", "0.0"]),
        )
        if all(check() for check in checks):
            return True
        print("Utils failed")
        return False

    def value_sanitizer_checks(self) -> bool:
        """Check :func:`is_number` and :meth:`ValueSanitizer.number_type`."""
        kind = self._sanitizer.number_type
        checks = (
            lambda: self.assert_true("[ISNUMBER TEST (1), is_number]", is_number("-3.4f")),
            lambda: self.assert_true("[ISNUMBER TEST (2), is_number]", is_number("25.77")),
            lambda: self.assert_true("[ISNUMBER TEST (3), is_number]", is_number("100")),
            lambda: self.assert_false("[ISNUMBER TEST (4), is_number]", is_number("-84.98.")),
            lambda: self.assert_false("[ISNUMBER TEST (5), is_number]", is_number("90a.f")),
            lambda: self.assert_true("[ISNUMBER TEST (6), is_number]", is_number("1.0")),
            lambda: self.assert_false("[ISNUMBER TEST (7), is_number]", is_number("-1.f")),
            lambda: self.assert_false("[ISNUMBER TEST (8), is_number]", is_number("1 0001")),
            lambda: self.assert_equal(
                "[NUMBERTYPE TEST (1), number_type]",
                kind("-3.4f", False),
                ["Negative", str(NumberKind.FLOAT.value)],
            ),
            lambda: self.assert_equal(
                "[NUMBERTYPE TEST (2), number_type]",
                kind("3.4", False),
                ["Positive", str(NumberKind.DOUBLE.value)],
            ),
            lambda: self.assert_equal(
                "[NUMBERTYPE TEST (3), number_type]",
                kind("-3", False),
                ["Negative", str(NumberKind.INT.value)],
            ),
            lambda: self.assert_equal(
                "[NUMBERTYPE TEST (4), number_type]", kind("-3.4f.", False), [NOT_A_NUMBER]
            ),
        )
        if all(check() for check in checks):
            return True
        print("Sanitizer failed")
        return False


def run_operations() -> bool:
    """Run the arithmetic suite; return whether it passed."""
    return OperationSuite().run()


def run_formattings() -> bool:
    """Run the formatting suite; return whether it passed."""
    return FormattingSuite().run()


def main(argv: Sequence[str] | None = None) -> int:
    """Run every suite and print the results."""
    parser = argparse.ArgumentParser(description="Run the calculator's self checks.")
    parser.parse_args(argv)
    print("Minimal tests:")
    run_operations()
    run_formattings()
    return 0