import re
import pandas as pd

from precision import parse_decimal, to_cents

TRUTHY = {"true", "1", "si", "sí", "yes", "y", "x", "pagado"}

def normalize_text(s: str) -> str:
    if s is None:
        return ""
    s = str(s).lower().strip()
    s = re.sub(r"[^a-z0-9áéíóúñü\s]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s

def coerce_date(series: pd.Series) -> pd.Series:
    return pd.to_datetime(series, errors="coerce").dt.date

def _amount(value):
    if value is None or str(value).strip() == "":
        return 0.0
    parsed = parse_decimal(value, default=None)
    return float("nan") if parsed is None else parsed

def coerce_amount(series: pd.Series) -> pd.Series:
    """Blank cells are 0; text that does not parse as an amount becomes NaN."""
    return series.apply(_amount).astype("float64")

def is_truthy(value) -> bool:
    if isinstance(value, bool):
        return value
    return normalize_text(value) in TRUTHY

def coerce_bool(series: pd.Series) -> pd.Series:
    return series.apply(is_truthy).astype(bool)

def _group_thousands(cents: int, thousands: str, decimal: str) -> str:
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}{whole:,}".replace(",", thousands) + f"{decimal}{frac:02d}"

def format_bs(amount) -> str:
    # 1234.5 -> "Bs 1.234,50"
    return "Bs " + _group_thousands(to_cents(amount), ".", ",")

def format_usd(amount) -> str:
    # 1234.5 -> "$1,234.50"
    return "$" + _group_thousands(to_cents(amount), ",", ".")
