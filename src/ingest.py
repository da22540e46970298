import pandas as pd

def load_csv(path: str) -> pd.DataFrame:
    # read everything as text: amounts may come as "1.000,50" and are parsed later
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    if df.columns.empty:
        raise ValueError(f"No columns found in {path}")
    return df
