import logging

import pandas as pd
import psycopg2
import psycopg2.extras

from config import DbConfig

log = logging.getLogger(__name__)

UNRESOLVED_SQL = """
    SELECT id, symbol, created_at, screenshot_url
    FROM trades
    WHERE screenshot_url IS NULL
    ORDER BY created_at ASC
"""

UPDATE_SQL = "UPDATE trades SET screenshot_url = %s, updated_at = NOW() WHERE id = %s"

def connect(cfg: DbConfig):
    log.debug("connecting to %s@%s:%s/%s", cfg.user, cfg.host, cfg.port, cfg.database)
    return psycopg2.connect(
        host=cfg.host,
        user=cfg.user,
        password=cfg.password,
        dbname=cfg.database,
        port=cfg.port,
    )

def fetch_unresolved_trades(conn) -> pd.DataFrame:
    with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
        cur.execute(UNRESOLVED_SQL)
        rows = cur.fetchall()
    return pd.DataFrame([dict(r) for r in rows], columns=["id", "symbol", "created_at", "screenshot_url"])

def apply_assignments(conn, assignments: pd.DataFrame) -> int:
    """Write each assigned url onto its trade. All-or-nothing."""
    if assignments.empty:
        return 0

    params = [(row["url"], row["record_id"]) for _, row in assignments.iterrows()]
    try:
        with conn.cursor() as cur:
            for url, trade_id in params:
                cur.execute(UPDATE_SQL, (url, trade_id))
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    return len(params)
