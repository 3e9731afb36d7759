from dataclasses import dataclass

import pandas as pd

DEFAULT_MAX_WINDOW = pd.Timedelta(days=2)

ASSIGNMENT_COLS = ["record_id", "label", "record_timestamp",
                   "file_name", "url", "file_timestamp", "distance"]

@dataclass(frozen=True)
class MatchResult:
    assignments: pd.DataFrame
    unmatched: pd.DataFrame

    @property
    def matched_count(self) -> int:
        return int(len(self.assignments))

    @property
    def unmatched_count(self) -> int:
        return int(len(self.unmatched))

def _oldest_first(records: pd.DataFrame) -> pd.DataFrame:
    if records.empty:
        return records.reset_index(drop=True)
    return records.reset_index(drop=True).sort_values("timestamp", kind="mergesort")

def greedy_nearest_match(records: pd.DataFrame,
                         files: pd.DataFrame,
                         max_window=DEFAULT_MAX_WINDOW) -> MatchResult:
    """
    Pair each record with the closest not-yet-used file by timestamp.

    records: record_id, timestamp, label
    files:   name, mtime, url

    Records are handled oldest first and each claims its nearest free file if
    the distance is strictly below max_window. Ties go to the earlier file in
    mtime order. Greedy: a claim is never revisited, so the total distance is
    not guaranteed to be minimal.
    """
    max_window = pd.Timedelta(max_window)

    if records.empty or files.empty:
        return MatchResult(assignments=pd.DataFrame(columns=ASSIGNMENT_COLS),
                           unmatched=_oldest_first(records))

    recs = _oldest_first(records)
    cands = files.sort_values("mtime", kind="mergesort").reset_index(drop=True)

    used = set()
    rows = []
    unmatched_idx = []

    for idx, r in recs.iterrows():
        available = cands.loc[~cands["url"].isin(used)]
        if available.empty:
            unmatched_idx.append(idx)
            continue

        diffs = (available["mtime"] - r["timestamp"]).abs()
        best = diffs.idxmin()
        best_diff = diffs.loc[best]

        if best_diff >= max_window:
            unmatched_idx.append(idx)
            continue

        f = cands.loc[best]
        used.add(f["url"])
        rows.append({
            "record_id": r["record_id"],
            "label": r.get("label", ""),
            "record_timestamp": r["timestamp"],
            "file_name": f.get("name", ""),
            "url": f["url"],
            "file_timestamp": f["mtime"],
            "distance": best_diff,
        })

    assignments = pd.DataFrame(rows, columns=ASSIGNMENT_COLS)
    unmatched = recs.loc[unmatched_idx].reset_index(drop=True)
    return MatchResult(assignments=assignments, unmatched=unmatched)

def remaining_files(files: pd.DataFrame, result: MatchResult) -> pd.DataFrame:
    claimed = set(result.assignments["url"].tolist())
    return files.loc[~files["url"].isin(claimed)].copy()
