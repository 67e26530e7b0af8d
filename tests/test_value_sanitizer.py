import pytest

from calcpack.value_sanitizer import (
    NOT_A_NUMBER,
    NumberKind,
    ValueSanitizer,
    is_number,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-3.4f", True),
        ("25.77", True),
        ("100", True),
        ("-84.98.", False),
        ("90a.f", False),
        ("1.0", True),
        ("-1.f", False),
        ("1 0001", False),
    ],
)
def test_is_number_source_cases(text, expected):
    assert is_number(text) is expected


@pytest.mark.parametrize("text", ["", "-", ".", "1.", "1..2", "abc"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_number_type_negative_float():
    sanitizer = ValueSanitizer()
    assert sanitizer.number_type("-3.4f", False) == ["Negative", str(NumberKind.FLOAT.value)]
    assert sanitizer.number_data() is NumberKind.FLOAT


def test_number_type_positive_double():
    sanitizer = ValueSanitizer()
    assert sanitizer.number_type("3.4", False) == ["Positive", str(NumberKind.DOUBLE.value)]
    assert sanitizer.number_data() is NumberKind.DOUBLE


def test_number_type_negative_int():
    sanitizer = ValueSanitizer()
    assert sanitizer.number_type("-3", False) == ["Negative", str(NumberKind.INT.value)]
    assert sanitizer.number_data() is NumberKind.INT


def test_number_type_not_a_number():
    sanitizer = ValueSanitizer()
    assert sanitizer.number_type("-3.4f.", False) == [NOT_A_NUMBER]
    assert sanitizer.number_data() is None


def test_number_type_empty_string():
    assert ValueSanitizer().number_type("", False) == [NOT_A_NUMBER]


@pytest.mark.parametrize(
    "text, code, kind",
    [
        ("7", "0", NumberKind.INT),
        ("7.5f", "1", NumberKind.FLOAT),
        ("7.5", "2", NumberKind.DOUBLE),
    ],
)
def test_number_type_code_names_the_kind(text, code, kind):
    sanitizer = ValueSanitizer()
    sign, reported = sanitizer.number_type(text, False)
    assert sign == "Positive"
    assert reported == code
    assert NumberKind(int(reported)) is kind
    assert sanitizer.number_data() is kind


def test_number_data_keeps_last_success():
    sanitizer = ValueSanitizer()
    sanitizer.number_type("7", False)
    sanitizer.number_type("x", False)
    assert sanitizer.number_data() is NumberKind.INT


def test_message_for_negative_int(capsys):
    ValueSanitizer().number_type("-3", True)
    assert capsys.readouterr().out == "The number -3 is negative, of type int\n"


def test_message_for_positive_double(capsys):
    ValueSanitizer().number_type("25.77", True)
    assert capsys.readouterr().out == "The number 25.77 is positive, of type double\n"


def test_no_message_when_not_asked(capsys):
    ValueSanitizer().number_type("25.77", False)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("text", ["-3.4f", "25.77", "100", "1.0", "0.03f"])
def test_is_number_agrees_with_number_type(text):
    assert is_number(text)
    assert ValueSanitizer().number_type(text, False) != [NOT_A_NUMBER]