import pytest

from jewel_appraiser.utils import fmt_money, is_number, parse_number_or


@pytest.mark.parametrize("raw,default,expected", [
    ("12.5", 0, 12.5),
    ("12.5 g", 0, 12.5),
    (" -4 ", 0, -4.0),
    ("1e3", 0, 1000.0),
    (".5", 0, 0.5),
    (7, 0, 7.0),
    ("", 1, 1),
    ("abc", 3, 3),
    (None, 0, 0),
    (True, 2, 2),
    (float("nan"), 5, 5),
    ("inf", 0, 0),
])
def test_parse_number_or(raw, default, expected):
    assert parse_number_or(raw, default) == expected


def test_is_number():
    assert is_number("0")
    assert is_number(-3.5)
    assert not is_number("")
    assert not is_number("n/a")


def test_fmt_money():
    assert fmt_money(1234.5, "EUR") == "€1,234.50"
    assert fmt_money(2, "USD") == "$2.00"
    assert fmt_money("x", "GBP") == "x"
