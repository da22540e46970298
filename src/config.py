from dataclasses import dataclass

@dataclass(frozen=True)
class CuadreConfig:
    transactions_path: str = "data/raw/transactions.csv"
    transactions_source: str = "app_export"   # key into column_map.json
    closure_path: str = "config/closure.json"
    column_map_path: str = "config/column_map.json"
    rules_path: str = "config/cuadre_rules.json"
    outputs_dir: str = "outputs"
