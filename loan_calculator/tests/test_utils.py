import pytest

from loan_calculator.core.utils import currency, parse_amount, round_currency


def test_round_currency_rounds_half_up():
    assert round_currency(416.66666) == 416.67
    assert round_currency(0.125) == 0.13
    assert round_currency(2.5) == 2.5
    assert round_currency(10.004) == 10.0


def test_currency_format():
    assert currency(1234.5) == "$1,234.50"
    assert currency(0) == "$0.00"
    assert currency(-42.1) == "-$42.10"
    assert currency(99.999, symbol="€") == "€100.00"


def test_parse_amount():
    assert parse_amount("$100,000.00") == 100_000.0
    assert parse_amount(" 5 %") == 5.0
    assert parse_amount("") is None
    assert parse_amount(None) is None
    assert parse_amount("1e5") == 100_000.0
    assert parse_amount("€ 1 250.50") == 1250.5
    for text in ("abc", "100k", "12-3", "-"):
        with pytest.raises(ValueError):
            parse_amount(text)
