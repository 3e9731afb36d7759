"""Re-attach orphaned screenshot files to trades with no screenshot_url.

Files are paired to trades by closeness of file mtime to trade created_at.

    python src/run_recover.py                # writes to the database
    python src/run_recover.py --dry-run      # or DRY_RUN=1
    python src/run_recover.py --trades-csv trades.csv   # offline, implies dry run
"""
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from config import RecoverConfig, env_dry_run, load_db_config, load_env
from db import connect, fetch_unresolved_trades, apply_assignments
from ingest import load_candidate_files, load_trades_csv
from standardize import standardize_records, standardize_files
from match import greedy_nearest_match, remaining_files
from rules import load_rules
from suggest import build_suggestions
from report import build_summary, write_outputs

log = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Recover orphaned trade screenshots by timestamp proximity.")
    p.add_argument("--dry-run", action="store_true", help="log intended matches without writing them")
    p.add_argument("--trades-csv", default=None, help="read unresolved trades from a CSV export instead of Postgres")
    p.add_argument("--rules", default=RecoverConfig.rules_path)
    p.add_argument("--outputs-dir", default=RecoverConfig.outputs_dir)
    p.add_argument("--max-window-days", type=float, default=None, help="override max_window_days from the rules file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    load_env()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = RecoverConfig(
        rules_path=args.rules,
        trades_csv=args.trades_csv,
        outputs_dir=args.outputs_dir,
        # there is no database to write to when reading from a CSV
        dry_run=args.dry_run or env_dry_run() or args.trades_csv is not None,
    )
    rules = load_rules(cfg.rules_path)
    if args.max_window_days is not None:
        rules = replace(rules, max_window_days=args.max_window_days)

    files = standardize_files(load_candidate_files(rules.sources, rules.image_extensions))

    conn = None
    try:
        if cfg.trades_csv:
            trades_raw = load_trades_csv(cfg.trades_csv)
        else:
            conn = connect(load_db_config())
            trades_raw = fetch_unresolved_trades(conn)

        trades = standardize_records(trades_raw)

        if trades.empty:
            print("No trades with NULL screenshot_url. Nothing to recover.")
            return 0
        if files.empty:
            print("No screenshot files found in the upload directories. Nothing to attach.")
            return 0

        print(f"Found {len(trades)} trades with NULL screenshot, {len(files)} orphaned files.\n")

        result = greedy_nearest_match(trades, files, rules.max_window)

        for _, a in result.assignments.iterrows():
            print(f"Match: trade {a['record_id']} ({a['label']}) -> {a['url']}")
            log.debug("trade %s distance %s", a["record_id"], a["distance"])

        updated = 0
        if not cfg.dry_run and conn is not None:
            updated = apply_assignments(conn, result.assignments)
    finally:
        if conn is not None:
            conn.close()

    suggestions = build_suggestions(result.unmatched, remaining_files(files, result), rules.top_k_suggestions)
    summary = build_summary(result, len(trades), len(files), rules.max_window_days, cfg.dry_run, updated)
    write_outputs(cfg.outputs_dir, result, suggestions, summary)

    if cfg.dry_run:
        print(f"\n[DRY RUN] Would have updated {result.matched_count} trades.")
    else:
        print(f"\nUpdated {updated} trades.")
    print(f"Unmatched trades: {result.unmatched_count} | Suggestions: {len(suggestions)} rows -> {cfg.outputs_dir}/suggestions.csv")
    return 0

if __name__ == "__main__":
    sys.exit(main())
