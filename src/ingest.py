import logging
import os
from typing import Dict, List

import pandas as pd

log = logging.getLogger(__name__)

REQUIRED_COLS = ["id", "created_at"]
FILE_COLS = ["name", "mtime", "url", "source_dir"]

def _list_images(directory: str, url_prefix: str, extensions: List[str]) -> List[dict]:
    if not os.path.isdir(directory):
        log.debug("source dir %s does not exist, skipping", directory)
        return []

    exts = tuple("." + e.lower() for e in extensions)
    rows = []
    for name in sorted(os.listdir(directory)):
        if not name.lower().endswith(exts):
            continue
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            continue
        rows.append({
            "name": name,
            "mtime": os.stat(path).st_mtime,
            "url": f"{url_prefix}{name}",
            "source_dir": directory,
        })
    return rows

def load_candidate_files(sources: List[Dict[str, str]], extensions: List[str]) -> pd.DataFrame:
    rows = []
    for src in sources:
        rows.extend(_list_images(src["dir"], src["url_prefix"], extensions))

    if not rows:
        return pd.DataFrame(columns=FILE_COLS)

    df = pd.DataFrame(rows, columns=FILE_COLS)
    df["mtime"] = pd.to_datetime(df["mtime"], unit="s", utc=True)
    return df.sort_values("mtime", kind="mergesort").reset_index(drop=True)

def load_trades_csv(path: str) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str)
    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns in {path}: {missing}")

    if "symbol" not in df.columns:
        df["symbol"] = ""
    if "screenshot_url" not in df.columns:
        df["screenshot_url"] = pd.NA

    has_shot = df["screenshot_url"].fillna("").astype(str).str.strip() != ""
    if has_shot.any():
        log.debug("dropping %d trades that already have a screenshot", int(has_shot.sum()))
    return df.loc[~has_shot].reset_index(drop=True)
