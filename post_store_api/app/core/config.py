"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment at all, which is the common
case for a throwaway demo backend.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Post Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix placed in front of the ``/posts`` routes, e.g. ``/api``.
    # Empty by default so the routes live at ``/posts``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
