import pandas as pd
from utils import normalize_screenshot_path, to_utc

RECORD_COLS = ["record_id", "timestamp", "label"]

def standardize_records(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=RECORD_COLS)

    df = df.reset_index(drop=True)
    labels = df["symbol"] if "symbol" in df.columns else pd.Series([""] * len(df))
    out = pd.DataFrame({
        "record_id": df["id"],
        "timestamp": to_utc(df["created_at"]),
        "label": labels.fillna("").astype(str),
    })

    bad = out["timestamp"].isna()
    if bad.any():
        bad_ids = out.loc[bad, "record_id"].tolist()
        raise ValueError(f"Unparseable created_at for trades: {bad_ids}")

    return out

def standardize_files(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if out.empty:
        return out

    out["mtime"] = to_utc(out["mtime"])
    if out["mtime"].isna().any():
        bad = out.loc[out["mtime"].isna(), "name"].tolist()
        raise ValueError(f"Unparseable modification time for files: {bad}")
    out["url"] = out["url"].apply(normalize_screenshot_path)
    return out
