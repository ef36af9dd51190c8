"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Tests
and embedding applications may construct their own ``Settings``
instance and pass it to ``create_app`` instead of relying on the
module‑level ``settings`` object.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Animal GraphQL API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When unset, logs go to the console only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the GraphQL endpoint.  POST requests execute operations;
    # GET requests from a browser render the explorer when it is enabled.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")

    # The interactive explorer (GraphiQL).  ``graphiql_path`` redirects
    # to the IDE served on ``graphql_path``.
    graphiql_enabled: bool = _env_flag("GRAPHIQL_ENABLED", "true")
    graphiql_path: str = os.getenv("GRAPHIQL_PATH", "/graphiql")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
