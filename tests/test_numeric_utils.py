import pytest

from calcpack.numeric_utils import parts, trim, trim_float
from calcpack.value_sanitizer import NOT_A_NUMBER


@pytest.mark.parametrize(
    "number, digits, expected",
    [
        (2.52, 1, "2.5"),
        (3.1441414141, 2, "3.14"),
        (15.292930291, 0, "15"),
        (3.4, 15, "3.400000000000000"),
        (-3.619999, 5, "-3.61999"),
    ],
)
def test_trim_source_cases(number, digits, expected):
    assert trim(number, digits) == expected


def test_trim_caps_digits(capsys):
    assert trim(3.4, 20) == trim(3.4, 15)
    assert "maximum 15 digits" in capsys.readouterr().out


@pytest.mark.parametrize("digits", range(0, 16))
def test_trim_length_follows_digits(digits):
    text = trim(2.52, digits)
    if digits == 0:
        assert "." not in text
    else:
        assert len(text.split(".")[1]) == digits


def test_trim_negative_digits_rejected():
    with pytest.raises(ValueError):
        trim(1.5, -1)


@pytest.mark.parametrize("number", [9.5, 2.0, -4.5, 0.25])
@pytest.mark.parametrize("digits", [0, 1, 3, 7])
def test_trim_float_matches_trim_for_exact_values(number, digits):
    assert trim_float(number, digits) == trim(number, digits)


def test_trim_float_caps_digits(capsys):
    assert trim_float(9.5, 12) == trim_float(9.5, 7)
    assert "maximum 7 digits" in capsys.readouterr().out


def test_trim_float_negative_digits_rejected():
    with pytest.raises(ValueError):
        trim_float(1.5, -2)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-3.9929", ["-3", "-0.9929"]),
        ("1.abb3", [NOT_A_NUMBER]),
        ("0.03f", ["0", "0.03"]),
        ("75", ["75", "0.0"]),
    ],
)
def test_parts_source_cases(text, expected):
    assert parts(text) == expected


@pytest.mark.parametrize("text", ["-3.9929", "25.77", "100", "1.0", "-0.5"])
def test_parts_add_back_up(text):
    whole, fractional = parts(text)
    assert float(whole) + float(fractional) == pytest.approx(float(text))


def test_parts_rejects_empty():
    assert parts("") == [NOT_A_NUMBER]