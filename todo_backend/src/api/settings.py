from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SQLITE_DB_PATH: path to sqlite db file. Default './data/todos.db'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: standard logging level name. Default 'INFO'
    - HOST: interface the server binds to. Default '127.0.0.1'
    - PORT: port the server listens on. Default 3000
    - STATIC_DIR: optional directory holding the UI bundle, served at '/'
    """

    sqlite_db_path: str
    cors_allow_origins: List[str]
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: Optional[str] = None


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    return port if 1 <= port <= 65535 else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    sqlite_path = _get_env("SQLITE_DB_PATH", "./data/todos.db").strip()
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    static_dir = os.getenv("STATIC_DIR") or None

    return Settings(
        sqlite_db_path=sqlite_path,
        cors_allow_origins=origins,
        log_level=log_level,
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_port(_get_env("PORT", "3000"), 3000),
        static_dir=static_dir.strip() if static_dir else None,
    )


# PUBLIC_INTERFACE
def configure_logging(level: str) -> None:
    """Install a basic stream handler on the root logger at the given level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
