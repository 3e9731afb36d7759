import pandas as pd
import pytest

T0 = pd.Timestamp("2025-03-10 14:00:00", tz="UTC")


def make_records(times, labels=None):
    labels = labels or [f"SYM{i}" for i in range(len(times))]
    return pd.DataFrame({
        "record_id": list(range(1, len(times) + 1)),
        "timestamp": pd.Series(times, dtype="datetime64[ns, UTC]"),
        "label": labels,
    })


def make_files(times, names=None):
    names = names or [f"shot_{i}.png" for i in range(len(times))]
    return pd.DataFrame({
        "name": names,
        "mtime": pd.Series(times, dtype="datetime64[ns, UTC]"),
        "url": [f"/uploads/{n}" for n in names],
    })


@pytest.fixture
def t0():
    return T0
