import json
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from models import Money
from precision import parse_decimal
from utils import is_truthy

@dataclass(frozen=True)
class Closure:
    """What the operator enters when closing a period: counted cash, manual top-ups, the rate."""
    date_from: date
    date_to: date
    exchange_rate: float
    cash_available: Money
    additional_amount: Money
    apply_excess_usd: bool = True
    agency: Optional[str] = None
    notes: str = ""

    @property
    def is_weekly(self) -> bool:
        return self.date_from != self.date_to

def _money(raw: Optional[Dict[str, Any]]) -> Money:
    raw = raw or {}
    return Money(bs=parse_decimal(raw.get("bs")), usd=parse_decimal(raw.get("usd")))

def _flag(value, default: bool) -> bool:
    # operators send "false" / "no" as text; absent means default
    if value is None or str(value).strip() == "":
        return default
    return is_truthy(value)

def closure_from_dict(raw: Dict[str, Any]) -> Closure:
    if "date_from" not in raw:
        raise ValueError("Closure is missing 'date_from'")
    date_from = date.fromisoformat(str(raw["date_from"]))
    date_to = date.fromisoformat(str(raw.get("date_to") or raw["date_from"]))
    if date_to < date_from:
        raise ValueError(f"Closure date_to {date_to} is before date_from {date_from}")

    # a missing rate parses to 0 and is rejected later by the calculator
    return Closure(
        date_from=date_from,
        date_to=date_to,
        exchange_rate=parse_decimal(raw.get("exchange_rate"), exact=True),
        cash_available=_money(raw.get("cash_available")),
        additional_amount=_money(raw.get("additional_amount")),
        apply_excess_usd=_flag(raw.get("apply_excess_usd"), default=True),
        agency=raw.get("agency"),
        notes=str(raw.get("notes", "")),
    )

def load_closure(path: str = "config/closure.json") -> Closure:
    with open(path, "r") as f:
        return closure_from_dict(json.load(f))
