"""
Configuration, read from environment variables.

* TRACKER_DATABASE_URL: where board records are stored (SQLAlchemy URL)
* TRACKER_DB_ECHO: log the SQL statements ("1"/"true"/"yes")
* TRACKER_LOG_LEVEL: level name for the standard library logging setup
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self

DEFAULT_DATABASE_URL = "sqlite:///./board_tracker.db"
DEFAULT_LOG_LEVEL = "WARNING"
TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    db_echo: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("TRACKER_DATABASE_URL", DEFAULT_DATABASE_URL),
            db_echo=env.get("TRACKER_DB_ECHO", "").lower() in TRUTHY,
            log_level=env.get("TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def load_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
