import re
from datetime import timezone

import pandas as pd

LEGACY_PREFIX = "/public/lovable-uploads/"

def normalize_text(s) -> str:
    if s is None or (isinstance(s, float) and pd.isna(s)):
        return ""
    s = str(s).lower().strip()
    s = re.sub(r"[^a-z0-9\s]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s

def normalize_screenshot_path(url) -> str:
    if not url or not isinstance(url, str):
        return ""
    u = url.strip()
    if not u:
        return ""
    # older rows carry the public/ prefix of the static dir
    if LEGACY_PREFIX in u:
        u = u.replace(LEGACY_PREFIX, "/lovable-uploads/")
    if u.startswith("public/lovable-uploads/"):
        u = "/lovable-uploads/" + u[len("public/lovable-uploads/"):]
    if not u.startswith("/") and not u.startswith("http"):
        u = "/" + u
    return u

def _as_utc(value):
    ts = pd.to_datetime(value, errors="coerce", format="ISO8601")
    if pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is None:
        # naive TIMESTAMP values are in the host's local time
        return pd.Timestamp(ts.to_pydatetime(warn=False).astimezone(timezone.utc))
    return ts.tz_convert("UTC")

def to_utc(series: pd.Series) -> pd.Series:
    return pd.to_datetime(series.apply(_as_utc), utc=True)
