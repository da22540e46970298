import json
from dataclasses import dataclass
from typing import Dict, Any, Tuple

from cuadre import DEFAULT_TOLERANCE

@dataclass(frozen=True)
class Rules:
    tolerance: float
    min_similarity: int
    expense_categories: Tuple[str, ...]
    debt_categories: Tuple[str, ...]

def load_rules(path: str = "config/cuadre_rules.json") -> Rules:
    with open(path, "r") as f:
        raw: Dict[str, Any] = json.load(f)

    return Rules(
        tolerance=float(raw.get("tolerance", DEFAULT_TOLERANCE)),
        min_similarity=int(raw.get("min_similarity", 85)),
        expense_categories=tuple(raw.get("expense_categories", ["gasto_operativo"])),
        debt_categories=tuple(raw.get("debt_categories", ["deuda"])),
    )
