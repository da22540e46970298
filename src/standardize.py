from typing import Optional

import pandas as pd
from rapidfuzz import fuzz, process

from rules import Rules
from utils import normalize_text, coerce_date, coerce_amount, coerce_bool

KIND_ALIASES = {
    "sale": "sale", "venta": "sale", "ventas": "sale",
    "prize": "prize", "premio": "prize", "premios": "prize",
    "expense": "expense", "gasto": "expense", "gastos": "expense",
    "mobile_payment": "mobile_payment", "pago_movil": "mobile_payment",
    "point_of_sale": "point_of_sale", "punto_venta": "point_of_sale", "punto_de_venta": "point_of_sale",
    "pending_prize": "pending_prize", "premio_pendiente": "pending_prize", "premio_por_pagar": "pending_prize",
}

OPERATING = "operating"
DEBT = "debt"

def normalize_kind(value) -> Optional[str]:
    key = normalize_text(value).replace(" ", "_")
    return KIND_ALIASES.get(key)

def classify_category(value, rules: Rules) -> Optional[str]:
    """Maps a free-text expense category onto OPERATING / DEBT, or None if nothing is close enough."""
    text = normalize_text(value)
    if not text:
        return None

    choices = {}
    for cat in rules.expense_categories:
        choices[normalize_text(cat.replace("_", " "))] = OPERATING
    for cat in rules.debt_categories:
        choices[normalize_text(cat.replace("_", " "))] = DEBT

    best = process.extractOne(text, list(choices), scorer=fuzz.token_set_ratio,
                              score_cutoff=rules.min_similarity)
    if best is None:
        return None
    return choices[best[0]]

def standardize(df: pd.DataFrame, rules: Rules) -> tuple[pd.DataFrame, pd.DataFrame]:
    out = df.copy()

    out["date"] = coerce_date(out["date"])
    out["amount_bs"] = coerce_amount(out["amount_bs"])
    out["amount_usd"] = coerce_amount(out["amount_usd"])
    out["kind"] = out["kind"].apply(normalize_kind)
    out["is_paid"] = coerce_bool(out["is_paid"])
    out["agency"] = out["agency"].astype(str).str.strip()
    out["system"] = out["system"].astype(str).str.strip().str.upper()
    out["expense_type"] = None

    is_expense = out["kind"] == "expense"
    out.loc[is_expense, "expense_type"] = out.loc[is_expense, "category"].apply(
        lambda c: classify_category(c, rules)
    )

    bad_date = out["date"].isna()
    bad_amount = out["amount_bs"].isna() | out["amount_usd"].isna()
    bad_kind = out["kind"].isna()
    bad_category = is_expense & out["expense_type"].isna()

    bad_mask = bad_date | bad_amount | bad_kind | bad_category
    exceptions = out.loc[bad_mask].copy()
    exceptions["exception_reason"] = ""
    exceptions.loc[bad_date[bad_mask], "exception_reason"] += "bad_date;"
    exceptions.loc[bad_amount[bad_mask], "exception_reason"] += "bad_amount;"
    exceptions.loc[bad_kind[bad_mask], "exception_reason"] += "bad_kind;"
    exceptions.loc[bad_category[bad_mask], "exception_reason"] += "bad_category;"

    clean = out.loc[~bad_mask].copy()

    clean["row_id"] = range(1, len(clean) + 1)
    exceptions["row_id"] = range(1, len(exceptions) + 1)

    return clean, exceptions
