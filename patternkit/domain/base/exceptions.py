"""Domain exceptions - usage-contract violations raised by the pattern core."""
from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when an argument violates a domain contract."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class CrossFamilyCollaborationError(ValidationError, ValueError):
    """Raised when products from two different families are asked to collaborate."""
    def __init__(self, expected_family: Any, actual_family: Any):
        super().__init__(
            f"Cannot collaborate across product families: "
            f"expected {expected_family}, got {actual_family}",
            {"expected_family": expected_family, "actual_family": actual_family},
        )
        self.expected_family = expected_family
        self.actual_family = actual_family


class UnsupportedVariantError(DomainException, TypeError):
    """Raised when a variant is not part of a closed variant set."""
    def __init__(self, variant: Any, message: Optional[str] = None):
        super().__init__(message or f"Unsupported variant: {variant!r}")
        self.variant = variant


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
