"""
Configuration helpers for the sup backend.

Exposes a frozen Settings object read from environment variables so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from argon2 import DEFAULT_MEMORY_COST, DEFAULT_PARALLELISM, DEFAULT_TIME_COST


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    port: int
    log_level: str
    password_hash_time_cost: int
    password_hash_memory_cost: int
    password_hash_parallelism: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./sup.db").strip(),
        port=_int(os.getenv("PORT"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        password_hash_time_cost=_int(os.getenv("PASSWORD_HASH_TIME_COST"), DEFAULT_TIME_COST),
        password_hash_memory_cost=_int(os.getenv("PASSWORD_HASH_MEMORY_COST"), DEFAULT_MEMORY_COST),
        password_hash_parallelism=_int(os.getenv("PASSWORD_HASH_PARALLELISM"), DEFAULT_PARALLELISM),
    )
