"""FastAPI dependency injection."""

from __future__ import annotations

from svg2react.config import Settings, settings


def get_settings() -> Settings:
    return settings
