"""Arithmetic helpers, number-string inspection and formatting, and a small self-check runner."""

__version__ = "1.1.0"
__all__ = ["basic_op", "checks", "numeric_utils", "suites", "value_sanitizer"]