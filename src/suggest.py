import pandas as pd
from rapidfuzz import fuzz

from utils import normalize_text

SUGGESTION_COLS = ["record_id", "label", "rank", "file_name", "url",
                   "distance_hours", "name_similarity", "reason"]

def _name_similarity(label: str, file_name: str) -> int:
    lab = normalize_text(label)
    if not lab:
        return 0
    return int(fuzz.partial_ratio(lab, normalize_text(file_name)))

def build_suggestions(unmatched: pd.DataFrame,
                      remaining: pd.DataFrame,
                      top_k: int) -> pd.DataFrame:
    """
    Nearest leftover files for every trade the matcher could not place.
    Ignores the time window on purpose so an operator can attach by hand.
    """
    if unmatched.empty or remaining.empty or top_k <= 0:
        return pd.DataFrame(columns=SUGGESTION_COLS)

    rows = []
    files = remaining.sort_values("mtime", kind="mergesort").copy()

    for _, r in unmatched.iterrows():
        candidates = files.copy()
        candidates["distance"] = (candidates["mtime"] - r["timestamp"]).abs()
        candidates = candidates.sort_values("distance", kind="mergesort").head(top_k)

        rank = 1
        for _, c in candidates.iterrows():
            hours = c["distance"].total_seconds() / 3600.0
            sim = _name_similarity(r.get("label", ""), c.get("name", ""))

            reason_parts = [f"time_diff={hours:.1f}h"]
            if sim > 0:
                reason_parts.append(f"name_sim={sim}")

            rows.append({
                "record_id": r["record_id"],
                "label": r.get("label", ""),
                "rank": rank,
                "file_name": c.get("name", ""),
                "url": c["url"],
                "distance_hours": round(hours, 2),
                "name_similarity": sim,
                "reason": "; ".join(reason_parts),
            })
            rank += 1

    return pd.DataFrame(rows, columns=SUGGESTION_COLS)
