"""Runtime settings, read from the environment once at startup."""

import logging
import os
from dataclasses import dataclass
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///./othello.db"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            database_url=os.getenv("OTHELLO_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.getenv("OTHELLO_LOG_LEVEL", "INFO").upper(),
            sql_echo=os.getenv("OTHELLO_SQL_ECHO", "false").lower() in ("1", "true", "yes"),
        )


settings = Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Set up the root logger for the app / CLI entrypoints. Library modules only ever call logging.getLogger(__name__)."""
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)
