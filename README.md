# calcpack

A small calculator toolkit: arithmetic helpers, checks on number strings,
fixed-digit formatting of floating point numbers, and a runner for the
package's own self-checks.

## Modules

### `calcpack.basic_op`

- `total(numbers)`: the sum of an iterable of numbers, `0` when it is empty.
- `product(numbers)`: the product of an iterable of numbers, `1` when it is empty.
- `divide(num1, num2)`: two integers give an integer quotient truncated
  toward zero. Any other pair gives an ordinary true division. A zero
  divisor raises `ZeroDivisionError`.
- `power(number, exponent)`: integer power by binary exponentiation. A
  negative exponent raises `ValueError`.

### `calcpack.numeric_utils`

- `trim(number, digits)`: writes the number with six decimals and then cuts,
  without rounding, to exactly `digits` decimals. The result is padded with
  zeros when needed. With `digits == 0` there is no decimal point. More than
  15 digits are capped at 15, and a notice is printed. Negative `digits`
  raise `ValueError`.
- `trim_float(number, digits)`: the same, applied to the single-precision
  value of `number`, capped at 7 digits.
- `parts(number)`: splits a number string into `[whole, fractional]`. The
  fractional part keeps the sign and drops a trailing `f`. A string that is
  not a number gives `["NOT A NUMBER"]`.
- `DOUBLE_MAX_DIGITS` and `FLOAT_MAX_DIGITS`: the two caps (15 and 7).

### `calcpack.value_sanitizer`

- `is_number(number)`: true for an optionally negative decimal with at most
  one point and an optional trailing `f`. The `f` may not follow the point
  directly.
- `NumberKind`: `INT` (0), `FLOAT` (1) and `DOUBLE` (2).
- `ValueSanitizer.number_type(number, show_message=False)`: returns
  `[sign, kind]`. `sign` is `"Positive"` or `"Negative"`, and `kind` is the
  `NumberKind` value as a string. A number string that is not valid gives
  `["NOT A NUMBER"]`. With `show_message` a one-line description is printed.
- `ValueSanitizer.number_data()`: the kind found by the last successful
  classification, or `None`.
- `NOT_A_NUMBER`: the marker string `"NOT A NUMBER"`.

### `calcpack.checks`

`CheckSuite` is an abstract base for suites of checks that record failures
instead of raising. It provides these methods:

- `assert_equal(test_name, actual, expected, digits=None)`: compares two
  values. With `digits`, it compares floats cut to that many decimals. Lists
  and tuples are compared element by element.
- `assert_true` and `assert_false`.
- `errors`: the messages recorded so far.
- `print_errors()`: prints every failure between two rules.

Subclasses implement `run()`.

### `calcpack.suites`

- `OperationSuite` and `FormattingSuite`: the built-in self-checks.
- `run_operations()` and `run_formattings()`: run one suite each and return
  whether it passed.
- `main(argv=None)`: runs both suites.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Examples

```python
from calcpack.basic_op import total, divide, power
from calcpack.numeric_utils import trim, parts
from calcpack.value_sanitizer import ValueSanitizer, is_number

total([2, -3, 4])         # 3
divide(5, 2)              # 2
power(2, 4)               # 16

trim(3.1441414141, 2)     # "3.14"
trim(15.292930291, 0)     # "15"
parts("-3.9929")          # ["-3", "-0.9929"]
parts("75")               # ["75", "0.0"]
parts("1.abb3")           # ["NOT A NUMBER"]

is_number("-3.4f")        # True
is_number("-84.98.")      # False

ValueSanitizer().number_type("-3.4f")   # ["Negative", "1"]
```

## Self-checks

The `calcpack` command runs the operation and formatting checks and prints
any failures:

```
calcpack
```

## What it does not do

There is no interactive calculator and no expression parser. The command only
runs the self-checks. Numbers are worked on through the functions above,
called from Python.