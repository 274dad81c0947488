"""Logging and settings helpers."""

from .logging_config import configure_logging
from .settings import AppSettings, load_settings

__all__ = ["AppSettings", "configure_logging", "load_settings"]
