import pytest

from precision import (
    parse_decimal,
    precise_abs,
    precise_add,
    precise_multiply,
    precise_round,
    precise_subtract,
    to_cents,
)
from utils import format_bs, format_usd


def test_add_and_subtract_avoid_float_drift():
    assert precise_add(0.1, 0.2) == 0.3
    assert precise_subtract(31, 29.5) == 1.5
    assert precise_subtract(0.3, 0.1, 0.2) == 0


def test_rounding_is_half_up():
    assert precise_round(1.235) == 1.24
    assert precise_round(-1.235) == -1.24
    assert to_cents(2.675) == 268
    assert precise_abs(-31.5) == 31.5


def test_multiply_keeps_rate_precision():
    assert precise_multiply(20, 50) == 1000
    assert precise_multiply(0.1, 0.2) == 0.02
    assert precise_multiply(12.34, 36.5723) == 451.30


@pytest.mark.parametrize("raw,expected", [
    ("1.000,50", 1000.5),
    ("1,000.50", 1000.5),
    ("900,00", 900.0),
    ("1,234,567", 1234567.0),
    ("-250,00", -250.0),
    ("Bs 3.650,00", 3650.0),
    ("$180", 180.0),
    (12.345, 12.35),
])
def test_parse_decimal_formats(raw, expected):
    assert parse_decimal(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1.2.3,4,5", float("nan")])
def test_parse_decimal_falls_back_to_default(raw):
    assert parse_decimal(raw) == 0.0
    assert parse_decimal(raw, default=None) is None


def test_parse_decimal_exact_keeps_rate_decimals():
    assert parse_decimal("36,5723", exact=True) == 36.5723
    assert parse_decimal(36.5723, exact=True) == 36.5723
    assert parse_decimal("36,5723") == 365723.0


def test_currency_formatting():
    assert format_bs(1234.5) == "Bs 1.234,50"
    assert format_bs(-200) == "Bs -200,00"
    assert format_usd(1234.5) == "$1,234.50"
    assert format_usd(0) == "$0.00"
