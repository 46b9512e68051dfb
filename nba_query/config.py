# nba_query/config.py
"""
Runtime configuration.

Values come from the environment, after loading a ``.env`` file from the
project root if one exists.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .api.errors import InvalidParameterError
from .data.store import DuckDBStore, SQLiteStore, TabularStore

logger = logging.getLogger(__name__)

_project_root = Path(__file__).parent.parent
_env_path = _project_root / ".env"
load_dotenv(dotenv_path=_env_path)

MAX_ROWS = 400
DEFAULT_DB_PATH = "data/serving/nba.sqlite"
BACKENDS = ("sqlite", "duckdb")


def clamp_limit(value: int) -> int:
    """Clamp a row count into [1, MAX_ROWS]."""
    return max(1, min(MAX_ROWS, int(value)))


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process."""

    db_path: str = DEFAULT_DB_PATH
    backend: str = "sqlite"
    default_limit: int = 25
    log_level: str = "INFO"
    port: int = 8005

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("NBA_QUERY_BACKEND", "sqlite").strip().lower()
        if backend not in BACKENDS:
            raise InvalidParameterError("NBA_QUERY_BACKEND", backend, " or ".join(BACKENDS))

        raw_limit = os.getenv("NBA_QUERY_DEFAULT_LIMIT", "25")
        try:
            default_limit = clamp_limit(int(raw_limit))
        except ValueError:
            raise InvalidParameterError(
                "NBA_QUERY_DEFAULT_LIMIT", raw_limit, "an integer"
            ) from None

        return cls(
            db_path=os.getenv("NBA_QUERY_DB_PATH", DEFAULT_DB_PATH),
            backend=backend,
            default_limit=default_limit,
            log_level=os.getenv("NBA_QUERY_LOG_LEVEL", "INFO").upper(),
            port=int(os.getenv("NBA_QUERY_PORT", "8005")),
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()


def get_store(settings: Optional[Settings] = None) -> TabularStore:
    """Build the store configured by ``settings`` (or the environment)."""
    settings = settings or get_settings()
    if settings.backend == "duckdb":
        store: TabularStore = DuckDBStore(settings.db_path)
    elif settings.backend == "sqlite":
        store = SQLiteStore(settings.db_path)
    else:
        raise InvalidParameterError("backend", settings.backend, " or ".join(BACKENDS))
    logger.debug(f"Using store {store!r}")
    return store
