import os
import json
import pandas as pd

from match import MatchResult

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def build_summary(result: MatchResult,
                  trades_considered: int,
                  files_found: int,
                  max_window_days: float,
                  dry_run: bool,
                  updated: int = 0) -> dict:
    return {
        "trades_considered": int(trades_considered),
        "files_found": int(files_found),
        "matched": result.matched_count,
        "unmatched": result.unmatched_count,
        "updated": int(updated),
        "dry_run": bool(dry_run),
        "max_window_days": max_window_days,
    }

def write_outputs(outputs_dir: str,
                  result: MatchResult,
                  suggestions: pd.DataFrame,
                  summary: dict) -> None:
    ensure_dir(outputs_dir)

    assignments = result.assignments.copy()
    if len(assignments):
        assignments["distance_hours"] = assignments["distance"].dt.total_seconds() / 3600.0
    else:
        assignments["distance_hours"] = pd.Series(dtype="float64")
    assignments = assignments.drop(columns=["distance"])

    assignments.to_csv(os.path.join(outputs_dir, "assignments.csv"), index=False)
    result.unmatched.to_csv(os.path.join(outputs_dir, "unmatched_trades.csv"), index=False)
    suggestions.to_csv(os.path.join(outputs_dir, "suggestions.csv"), index=False)

    with open(os.path.join(outputs_dir, "recover_summary.json"), "w") as f:
        json.dump(summary, f, indent=2, default=str)
