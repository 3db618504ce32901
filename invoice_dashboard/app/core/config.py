"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
dashboard runs locally without any configuration.  In a production
deployment override at least ``SECRET_KEY`` and ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Invoice Dashboard")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Name of the cookie carrying the signed session token after login.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "session")

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "invoice_dashboard.db")

    # Rows per page in the invoice table.
    items_per_page: int = int(os.getenv("ITEMS_PER_PAGE", "6"))

    # Delay applied to search input before the URL is rewritten.
    search_debounce_ms: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "300"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
