import pytest

from csv_analyzer.numeric import NumericPrefix, parse_numeric, parse_numeric_prefix


@pytest.mark.parametrize(
    "text, value, remainder",
    [
        ("42", 42.0, ""),
        ("42kg", 42.0, "kg"),
        ("  -3.5 stars", -3.5, " stars"),
        ("+7", 7.0, ""),
        (".5", 0.5, ""),
        ("12.", 12.0, ""),
        ("1e3", 1000.0, ""),
        ("2.5E-2x", 0.025, "x"),
        ("1e", 1.0, "e"),
        ("1e+", 1.0, "e+"),
        ("0x10", 0.0, "x10"),
        ("1,000", 1.0, ",000"),
        ("3.14.15", 3.14, ".15"),
    ],
)
def test_parse_numeric_prefix(text, value, remainder):
    assert parse_numeric_prefix(text) == NumericPrefix(value=value, remainder=remainder)


@pytest.mark.parametrize(
    "text",
    ["", "   ", "abc", "kg42", "-", "+", ".", "-.", "e5", "Infinity", "NaN", "1e999", "\u0661\u0662", "\uff11"],
)
def test_parse_numeric_prefix_rejects(text):
    assert parse_numeric_prefix(text) is None


def test_parse_numeric_returns_value_only():
    assert parse_numeric("19.99 USD") == 19.99
    assert parse_numeric("USD 19.99") is None
