"""Configuration for the RBAC store API."""

from .settings import Settings, get_settings, FIREBASE_REQUIRED_VARS
from .logging_config import LoggingConfig, configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "FIREBASE_REQUIRED_VARS",
    "LoggingConfig",
    "configure_logging",
]
