"""Configuration helpers for eventparse."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    ParserSettings,
    bootstrap_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ParserSettings",
    "bootstrap_settings",
    "load_settings",
    "save_settings",
]
