import json
import re
import unicodedata
import pandas as pd
from typing import Dict, List, Optional

REQUIRED = ["date", "kind", "amount_bs"]
OPTIONAL = ["amount_usd", "agency", "system", "category", "is_paid", "description"]

# headers used by the agency tables and the taquilla spreadsheets
HEADER_ALIASES = {
    "date": ["fecha", "transaction_date", "session_date", "fecha_transaccion"],
    "kind": ["tipo", "tipo_movimiento", "movimiento"],
    "amount_bs": ["monto_bs", "bolivares", "bs", "monto_bolivares"],
    "amount_usd": ["monto_usd", "dolares", "usd", "monto_dolares"],
    "agency": ["agencia", "agency_id"],
    "system": ["sistema", "lottery_system", "lottery_system_id", "sistema_loteria"],
    "category": ["categoria"],
    "is_paid": ["pagado", "pagada"],
    "description": ["descripcion", "nota", "concepto"],
}

def _norm(s: str) -> str:
    # "Categoría", "monto-bs" and "Monto Bs" compare as "categoria" / "monto_bs"
    s = unicodedata.normalize("NFKD", str(s)).encode("ascii", "ignore").decode()
    return re.sub(r"[\s\-.]+", "_", s.strip().lower())

def load_column_map(path: str = "config/column_map.json") -> dict:
    with open(path, "r") as f:
        return json.load(f)

def _candidates(std: str, src_map: Dict) -> List[str]:
    # export-specific headers win over the built-in aliases
    return list(src_map.get(std, [])) + [std] + HEADER_ALIASES.get(std, [])

def _find_column(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    cols = {_norm(c): c for c in df.columns}
    for cand in candidates:
        found = cols.get(_norm(cand))
        if found is not None:
            return found
    return None

def apply_mapping(df: pd.DataFrame, source: str, column_map: Dict) -> pd.DataFrame:
    """
    Renames a transactions export onto the standard columns (date, kind, amount_bs,
    amount_usd, agency, system, category, is_paid, description). Headers listed for
    `source` in column_map.json are tried first, then the usual Spanish names.
    Optional columns that are absent come back as empty text.
    """
    if source not in column_map:
        raise ValueError(f"No column mapping found for source='{source}' in config/column_map.json")
    src_map = column_map[source] or {}

    out = pd.DataFrame(index=df.index)
    found = {std: _find_column(df, _candidates(std, src_map)) for std in REQUIRED + OPTIONAL}

    missing_required = [std for std in REQUIRED if found[std] is None]
    if missing_required:
        raise ValueError(f"Missing required standardized fields for {source}: {missing_required}. "
                         f"Headers seen: {list(df.columns)}")

    for std, col in found.items():
        out[std] = df[col] if col is not None else ""
    return out
