from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import pandas as pd

from closure import Closure
from models import Money, ReconciliationInput
from precision import from_cents, to_cents
from standardize import DEBT, OPERATING

NO_SYSTEM = "SIN SISTEMA"

@dataclass(frozen=True)
class PeriodTotals:
    total_sales: Money = field(default_factory=Money.zero)
    total_prizes: Money = field(default_factory=Money.zero)
    total_expenses: Money = field(default_factory=Money.zero)
    total_debts: Money = field(default_factory=Money.zero)
    mobile_payments_received: float = 0.0
    mobile_payments_paid: float = 0.0
    total_point_of_sale: float = 0.0
    pending_prizes: Money = field(default_factory=Money.zero)
    rows: int = 0

def filter_period(df: pd.DataFrame, date_from: date, date_to: date,
                  agency: Optional[str] = None) -> pd.DataFrame:
    mask = (df["date"] >= date_from) & (df["date"] <= date_to)
    if agency:
        mask &= df["agency"] == agency
    return df.loc[mask].copy()

def filter_exceptions(exceptions: pd.DataFrame, date_from: date, date_to: date,
                      agency: Optional[str] = None) -> pd.DataFrame:
    """Keeps the rejected rows that belong to the period; rows whose date did not parse stay in."""
    mask = exceptions["date"].apply(lambda d: pd.isna(d) or date_from <= d <= date_to).astype(bool)
    if agency:
        mask &= exceptions["agency"].isin([agency, ""])
    return exceptions.loc[mask].copy()

def _sum(series: pd.Series) -> float:
    # sum in cents so 0.1 + 0.2 stays 0.3
    return from_cents(int(series.map(to_cents).sum()))

def _money(df: pd.DataFrame) -> Money:
    return Money(bs=_sum(df["amount_bs"]), usd=_sum(df["amount_usd"]))

def aggregate_period(df: pd.DataFrame, weekly: bool = False) -> PeriodTotals:
    """
    Reduces standardized transaction rows of a single period to the totals the
    calculator needs. Absent kinds aggregate to zero.

    A daily cuadre counts every expense and debt of the day. A weekly cuadre
    counts only the unpaid ones; paid ones were already settled during the week.
    """
    by_kind = {k: df.loc[df["kind"] == k] for k in
               ("sale", "prize", "expense", "mobile_payment", "point_of_sale", "pending_prize")}

    expenses = by_kind["expense"]
    if weekly:
        expenses = expenses.loc[~expenses["is_paid"]]
    mobile = by_kind["mobile_payment"]["amount_bs"]
    pending = by_kind["pending_prize"]

    return PeriodTotals(
        total_sales=_money(by_kind["sale"]),
        total_prizes=_money(by_kind["prize"]),
        total_expenses=_money(expenses.loc[expenses["expense_type"] == OPERATING]),
        total_debts=_money(expenses.loc[expenses["expense_type"] == DEBT]),
        mobile_payments_received=_sum(mobile[mobile > 0]),
        mobile_payments_paid=abs(_sum(mobile[mobile < 0])),
        total_point_of_sale=_sum(by_kind["point_of_sale"]["amount_bs"]),
        pending_prizes=_money(pending.loc[~pending["is_paid"]]),
        rows=int(len(df)),
    )

def build_input(totals: PeriodTotals, closure: Closure) -> ReconciliationInput:
    return ReconciliationInput(
        exchange_rate=closure.exchange_rate,
        total_sales=totals.total_sales,
        total_prizes=totals.total_prizes,
        total_expenses=totals.total_expenses,
        total_debts=totals.total_debts,
        mobile_payments_received=totals.mobile_payments_received,
        mobile_payments_paid=totals.mobile_payments_paid,
        total_point_of_sale=totals.total_point_of_sale,
        cash_available=closure.cash_available,
        pending_prizes=totals.pending_prizes,
        additional_amount=closure.additional_amount,
        apply_excess_usd=closure.apply_excess_usd,
    )

def _sales_prizes_by(df: pd.DataFrame, key: str) -> pd.DataFrame:
    columns = [key, "sales_bs", "sales_usd", "prizes_bs", "prizes_usd", "net_bs", "net_usd"]
    if df.empty:
        return pd.DataFrame(columns=columns)

    work = df[[key]].copy()
    for kind, prefix in (("sale", "sales"), ("prize", "prizes")):
        is_kind = df["kind"] == kind
        for currency in ("bs", "usd"):
            cents = df[f"amount_{currency}"].map(to_cents)
            work[f"{prefix}_{currency}"] = cents.where(is_kind, 0)

    grouped = (
        work.groupby(key, as_index=False)
            .agg(
                sales_bs=("sales_bs", "sum"),
                sales_usd=("sales_usd", "sum"),
                prizes_bs=("prizes_bs", "sum"),
                prizes_usd=("prizes_usd", "sum"),
            )
    )
    grouped["net_bs"] = grouped["sales_bs"] - grouped["prizes_bs"]
    grouped["net_usd"] = grouped["sales_usd"] - grouped["prizes_usd"]
    for col in columns[1:]:
        grouped[col] = grouped[col].apply(lambda c: from_cents(int(c)))
    return grouped[columns].sort_values(key).reset_index(drop=True)

def summarize_by_day(df: pd.DataFrame) -> pd.DataFrame:
    """Per-day sales, prizes and net in both currencies, for weekly reporting."""
    return _sales_prizes_by(df, "date")

def summarize_by_system(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sales, prizes and net per lottery system. Only sale and prize rows take part,
    so the system rows add up to the agency's total_sales / total_prizes.
    """
    games = df.loc[df["kind"].isin(["sale", "prize"])].copy()
    games["system"] = games["system"].replace("", NO_SYSTEM)
    return _sales_prizes_by(games, "system")
