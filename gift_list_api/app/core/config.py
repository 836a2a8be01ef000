"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
should at least set ``DATABASE_URL`` and ``EXA_API_KEY``.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Gift List API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "gift_list.db"))

    # Logical name of the list served by the HTTP routes.  Every request
    # for this name is routed to the same storage unit.
    default_list_name: str = field(default_factory=lambda: os.getenv("GIFT_LIST_NAME", "gift-list-store"))

    # Gift idea search (Exa).  Without an API key the search route
    # answers with an error instead of calling out.
    exa_api_key: str = field(default_factory=lambda: os.getenv("EXA_API_KEY", ""))
    exa_base_url: str = field(default_factory=lambda: os.getenv("EXA_BASE_URL", "https://api.exa.ai"))
    search_num_results: int = field(default_factory=lambda: int(os.getenv("SEARCH_NUM_RESULTS", "3")))
    search_timeout: float = field(default_factory=lambda: float(os.getenv("SEARCH_TIMEOUT", "30")))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    def __post_init__(self) -> None:
        # The HTTP routes resolve this name on every request.
        if not self.default_list_name or not self.default_list_name.strip():
            raise ValueError("GIFT_LIST_NAME must not be empty")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests build their own
# ``Settings`` and pass it to ``create_app`` instead.
settings = Settings()
