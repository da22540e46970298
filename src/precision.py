import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

CENTS = Decimal("0.01")

Number = Union[int, float, Decimal]

def _as_decimal(value: Number) -> Decimal:
    # str() keeps the shortest repr of a float, so 0.1 stays 0.1
    return value if isinstance(value, Decimal) else Decimal(str(value))

def to_cents(value: Number) -> int:
    """Quantize to 2dp (half up) and return the amount as integer cents."""
    if value is None:
        return 0
    return int(_as_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP) * 100)

def from_cents(cents: int) -> float:
    return float(Decimal(cents) / 100)

def precise_add(*values: Number) -> float:
    return from_cents(sum(to_cents(v) for v in values))

def precise_subtract(a: Number, *values: Number) -> float:
    return from_cents(to_cents(a) - sum(to_cents(v) for v in values))

def precise_multiply(amount: Number, factor: Number) -> float:
    """
    Multiplies a currency amount by a factor such as an exchange rate.
    The amount is taken in cents; the factor is kept exact (BCV rates carry
    4 decimals) and the product is rounded back to cents.
    """
    exact = Decimal(to_cents(amount)) * _as_decimal(factor)
    return from_cents(int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP)))

def precise_round(value: Number) -> float:
    return from_cents(to_cents(value))

def precise_abs(value: Number) -> float:
    return from_cents(abs(to_cents(value)))

def is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False

_NUMERIC = re.compile(r"^[+-]?\d+(\.\d+)?$")

def parse_decimal(value, default: Optional[float] = 0.0, exact: bool = False) -> Optional[float]:
    """
    Parses a user-entered amount into a 2dp float.
    Accepts Venezuelan (1.000,50) and US (1,000.50) formats; anything empty or
    unparseable returns `default`. With exact=True the value is not rounded and
    a lone comma is always the decimal separator (exchange rates like 36,5723).
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float, Decimal)):
        if not is_finite(float(value)):
            return default
        return float(value) if exact else precise_round(value)

    clean = str(value).strip().replace(" ", "")
    for symbol in ("Bs.", "Bs", "$", "USD"):
        clean = clean.replace(symbol, "")
    if not clean:
        return default

    if "," in clean and "." in clean:
        if clean.rfind(",") > clean.rfind("."):
            # 1.000,50
            clean = clean.replace(".", "").replace(",", ".")
        else:
            # 1,000.50
            clean = clean.replace(",", "")
    elif "," in clean:
        parts = clean.split(",")
        if len(parts) == 2 and (len(parts[1]) <= 2 or exact):
            clean = clean.replace(",", ".")
        else:
            clean = clean.replace(",", "")

    if not _NUMERIC.match(clean):
        return default
    try:
        parsed = Decimal(clean)
    except InvalidOperation:
        return default
    return float(parsed) if exact else precise_round(parsed)
