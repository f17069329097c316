"""Configuration package."""

from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig, LogLevel, LogRenderer, validate_config

__all__ = [
    "ConfigurationManager",
    "AppConfig",
    "LoggingConfig",
    "LogLevel",
    "LogRenderer",
    "validate_config",
]
