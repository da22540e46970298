import os
import json
import pandas as pd

from closure import Closure
from models import ReconciliationInput, ReconciliationResult

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def verdict(result: ReconciliationResult) -> str:
    return "CUADRADO" if result.is_balanced else "DESCUADRADO"

def write_outputs(outputs_dir: str,
                  closure: Closure,
                  data: ReconciliationInput,
                  result: ReconciliationResult,
                  daily: pd.DataFrame,
                  systems: pd.DataFrame,
                  exceptions: pd.DataFrame) -> None:
    ensure_dir(outputs_dir)

    daily.to_csv(os.path.join(outputs_dir, "daily_summary.csv"), index=False)
    systems.to_csv(os.path.join(outputs_dir, "system_summary.csv"), index=False)
    exceptions.to_csv(os.path.join(outputs_dir, "exceptions.csv"), index=False)

    summary = {
        "agency": closure.agency,
        "date_from": closure.date_from.isoformat(),
        "date_to": closure.date_to.isoformat(),
        "notes": closure.notes,
        "verdict": verdict(result),
        "input": data.to_dict(),
        "result": result.to_dict(),
        "weekly": closure.is_weekly,
        "exceptions_rows": int(len(exceptions)),
    }

    with open(os.path.join(outputs_dir, "cuadre_result.json"), "w") as f:
        json.dump(summary, f, indent=2, default=str)
