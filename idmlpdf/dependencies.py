"""FastAPI dependency injection."""

from __future__ import annotations

from idmlpdf.config import Settings, settings


def get_settings() -> Settings:
    return settings
