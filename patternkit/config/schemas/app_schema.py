"""Application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from patternkit.config.schemas.logging_schema import LoggingConfig
from patternkit.domain.base.exceptions import ConfigurationError


class AppConfig(BaseModel):
    """Top-level configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration dictionary.

    Args:
        data: Raw configuration data

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", e.errors()) from e
