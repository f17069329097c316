"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogRenderer(str, Enum):
    """Final structlog renderer."""
    CONSOLE = "console"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Root log level")
    renderer: LogRenderer = Field(LogRenderer.CONSOLE, description="Output renderer")
    format: str = Field(
        "%(message)s",
        description="stdlib format string wrapped around each rendered event",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("renderer", mode="before")
    @classmethod
    def normalize_renderer(cls, v):
        """Accept renderer names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
