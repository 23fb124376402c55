"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the service can run without a settings
library or configuration file.  Defaults are provided for all fields
and are suitable for local development against a SQLite file.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the user routes are mounted.  The collection
    # lives at ``{api_prefix}/users``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "user_management.db")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Defaults for the reference HTTP client in ``client.py``.
    client_base_url: str = os.getenv("USER_API_BASE_URL", "http://localhost:8000/api/users")
    client_timeout: float = float(os.getenv("USER_API_TIMEOUT", "15"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
