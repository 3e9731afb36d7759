import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

@dataclass(frozen=True)
class RecoverConfig:
    rules_path: str = "config/recover_config.json"
    trades_csv: Optional[str] = None   # read unresolved trades from a CSV export instead of Postgres
    outputs_dir: str = "outputs"
    dry_run: bool = False

@dataclass(frozen=True)
class DbConfig:
    host: str = "localhost"
    user: str = "tradebuddy_user"
    password: Optional[str] = None
    database: str = "tradebuddy"
    port: int = 5440

def load_env() -> None:
    # .env next to where the operator runs the tool
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)

def env_dry_run() -> bool:
    return os.getenv("DRY_RUN") == "1"

def load_db_config() -> DbConfig:
    load_env()
    port = os.getenv("PGPORT")
    return DbConfig(
        host=os.getenv("PGHOST") or "localhost",
        user=os.getenv("PGUSER") or "tradebuddy_user",
        password=os.getenv("PGPASSWORD"),
        database=os.getenv("PGDATABASE") or "tradebuddy",
        port=int(port) if port else 5440,
    )
