"""Utility modules for utf8sweep."""

from utf8sweep.utils.config import (
    ConfigurationError,
    load_settings,
    reset_settings,
    resolve_setting,
    save_settings,
)
from utf8sweep.utils.debug import setup_logger

__all__ = [
    "ConfigurationError",
    "load_settings",
    "reset_settings",
    "resolve_setting",
    "save_settings",
    "setup_logger",
]
