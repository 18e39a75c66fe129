"""
Application package initializer.

The app is split into ``core`` (configuration, logging, errors),
``schemas`` (pydantic payloads), ``services`` (the in-memory store)
and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
