"""Base domain layer - shared kernel for all pattern modules."""

from .exceptions import (
    ConfigurationError,
    CrossFamilyCollaborationError,
    DomainException,
    UnsupportedVariantError,
    ValidationError,
)
from .ports import OutputPort

__all__ = [
    # Exceptions
    "DomainException",
    "ValidationError",
    "CrossFamilyCollaborationError",
    "UnsupportedVariantError",
    "ConfigurationError",
    # Ports
    "OutputPort",
]
