"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig, LogLevel, LogRenderer

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "LogLevel",
    "LogRenderer",
]
