"""Item catalog configuration management.

Loads configuration from environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

STORE_BACKENDS = ("memory", "sql")


@dataclass
class DBConfig:
    """Database connection configuration."""

    url: str
    pool_size: int = 10
    pool_max_overflow: int = 20
    pool_timeout: int = 30
    echo: bool = False  # SQL logging


@dataclass
class HistoryConfig:
    """Recent-items ring and undo history settings."""

    recent_capacity: int = 5


@dataclass
class AppConfig:
    """Root application configuration.

    Loads from environment variables with fail-fast on missing required values.
    """

    store_backend: str = "memory"
    db: DBConfig | None = None
    log_level: str = "INFO"
    json_logs: bool = False
    seed_default_items: bool = True

    history: HistoryConfig = field(default_factory=HistoryConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Optional (with defaults):
        - STORE_BACKEND: "memory" or "sql" (default: "memory")
        - DATABASE_URL: required when STORE_BACKEND is "sql"
        - RECENT_ITEMS_CAPACITY: size of the recent-items ring (default: 5)
        - SEED_DEFAULT_ITEMS: seed an empty store at startup (default: true)
        - LOG_LEVEL: Logging verbosity (default: "INFO")

        Raises:
            KeyError: If DATABASE_URL is missing for the sql backend
            ValueError: If STORE_BACKEND or RECENT_ITEMS_CAPACITY is invalid
        """
        store_backend = os.getenv("STORE_BACKEND", "memory").lower()
        if store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, "
                f"got {store_backend!r}"
            )

        db_config = None
        database_url = os.environ.get("DATABASE_URL")
        if store_backend == "sql" and not database_url:
            raise KeyError(
                "DATABASE_URL environment variable is required for the sql store. "
                "Example: sqlite+aiosqlite:///./catalog.db"
            )
        if database_url:
            db_config = DBConfig(
                url=database_url,
                pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
                pool_max_overflow=int(os.getenv("DB_POOL_MAX_OVERFLOW", "20")),
                pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),
                echo=os.getenv("DB_ECHO", "false").lower() == "true",
            )

        recent_capacity = int(os.getenv("RECENT_ITEMS_CAPACITY", "5"))
        if recent_capacity < 1:
            raise ValueError("RECENT_ITEMS_CAPACITY must be at least 1")

        return cls(
            store_backend=store_backend,
            db=db_config,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
            seed_default_items=os.getenv("SEED_DEFAULT_ITEMS", "true").lower()
            == "true",
            history=HistoryConfig(recent_capacity=recent_capacity),
        )


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment.

    Returns:
        AppConfig: Application configuration

    Raises:
        KeyError: If required environment variables are missing
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the env."""
    global _config
    _config = None
