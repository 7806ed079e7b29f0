"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables, with a ``.env`` file in the working directory loaded first so
local overrides do not have to be exported by hand.  Defaults are
provided for all fields and follow the local development convention of
serving on port 3000.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "AppyDaveApp API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "appydave.db")
    # Seconds a connection waits on a locked database before giving up.
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "5"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Insert the default service records on startup when the table is empty.
    seed_on_startup: bool = _env_bool("SEED_ON_STARTUP")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
