import json
from dataclasses import dataclass, field
from typing import Dict, Any, List

import pandas as pd

DEFAULT_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "webp"]
DEFAULT_SOURCES = [
    {"dir": "backend/uploads", "url_prefix": "/uploads/"},
    {"dir": "public/lovable-uploads", "url_prefix": "/lovable-uploads/"},
]

@dataclass(frozen=True)
class Rules:
    max_window_days: float = 2
    image_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    sources: List[Dict[str, str]] = field(default_factory=lambda: [dict(s) for s in DEFAULT_SOURCES])
    top_k_suggestions: int = 3

    @property
    def max_window(self) -> pd.Timedelta:
        return pd.Timedelta(days=self.max_window_days)

def load_rules(path: str = "config/recover_config.json") -> Rules:
    with open(path, "r") as f:
        raw: Dict[str, Any] = json.load(f)

    sources = raw.get("sources", DEFAULT_SOURCES)
    for s in sources:
        if "dir" not in s or "url_prefix" not in s:
            raise ValueError(f"Each source in {path} needs 'dir' and 'url_prefix': {s}")

    return Rules(
        max_window_days=float(raw.get("max_window_days", 2)),
        image_extensions=[str(e).lower().lstrip(".") for e in raw.get("image_extensions", DEFAULT_EXTENSIONS)],
        sources=[{"dir": str(s["dir"]), "url_prefix": str(s["url_prefix"])} for s in sources],
        top_k_suggestions=int(raw.get("top_k_suggestions", 3)),
    )
