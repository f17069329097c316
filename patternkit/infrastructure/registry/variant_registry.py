"""Variant Registry - registry pattern for selecting pattern variants by name.

Callers pick a creator, factory, builder or visitor by key instead of
importing the concrete class. Registration is explicit and static.
"""

from enum import Enum
from typing import Any, Callable, Dict, List

from patternkit.domain.base.exceptions import ConfigurationError, UnsupportedVariantError
from patternkit.infrastructure.logging import get_logger


class PatternKind(str, Enum):
    """Kinds of variants the registry can hold."""
    CREATOR = "creator"
    FACTORY = "factory"
    BUILDER = "builder"
    VISITOR = "visitor"


class VariantRegistration:
    """Container for variant registration information."""

    def __init__(self, kind: PatternKind, name: str, factory: Callable[[], Any]):
        """
        Initialize variant registration.

        Args:
            kind: Pattern kind the variant belongs to
            name: Key the variant is selected by (e.g., 'microsoft', 'family-1')
            factory: Zero-argument callable creating the variant
        """
        self.kind = kind
        self.name = name
        self.factory = factory

    def __repr__(self) -> str:
        return f"VariantRegistration(kind='{self.kind.value}', name='{self.name}')"


class VariantRegistry:
    """
    Registry of variant factories, keyed by kind and name.

    Not safe for concurrent registration without external synchronization.
    """

    def __init__(self):
        """Initialize variant registry."""
        self._registrations: Dict[PatternKind, Dict[str, VariantRegistration]] = {
            kind: {} for kind in PatternKind
        }
        self.logger = get_logger(__name__)

    def register(self, kind: PatternKind, name: str, factory: Callable[[], Any]) -> None:
        """
        Register a variant factory.

        Raises:
            ConfigurationError: If the name is already registered for the kind
        """
        kind = PatternKind(kind)
        if name in self._registrations[kind]:
            raise ConfigurationError(f"{kind.value} variant '{name}' is already registered")

        self._registrations[kind][name] = VariantRegistration(kind, name, factory)
        self.logger.debug("Registered variant", kind=kind.value, name=name)

    def unregister(self, kind: PatternKind, name: str) -> bool:
        """Remove a registration; returns whether one existed."""
        return self._registrations[PatternKind(kind)].pop(name, None) is not None

    def create(self, kind: PatternKind, name: str) -> Any:
        """
        Create a new instance of a registered variant.

        Raises:
            UnsupportedVariantError: If no variant is registered under the name
        """
        kind = PatternKind(kind)
        registration = self._registrations[kind].get(name)
        if registration is None:
            available = ", ".join(self.get_registered(kind)) or "none"
            raise UnsupportedVariantError(
                name,
                f"Unsupported {kind.value} variant: {name}. Available: {available}",
            )
        return registration.factory()

    def is_registered(self, kind: PatternKind, name: str) -> bool:
        return name in self._registrations[PatternKind(kind)]

    def get_registered(self, kind: PatternKind) -> List[str]:
        """Get registered names for a kind, in registration order."""
        return list(self._registrations[PatternKind(kind)])

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        for registrations in self._registrations.values():
            registrations.clear()


def default_registry() -> VariantRegistry:
    """Create a registry holding every shipped variant."""
    from patternkit.domain.abstract_factory import ConcreteFactory1, ConcreteFactory2
    from patternkit.domain.builder import ConcreteBuilder1
    from patternkit.domain.factory_method import Apple, Microsoft
    from patternkit.domain.visitor import ConcreteVisitor1, ConcreteVisitor2

    registry = VariantRegistry()
    registry.register(PatternKind.CREATOR, "microsoft", Microsoft)
    registry.register(PatternKind.CREATOR, "apple", Apple)
    registry.register(PatternKind.FACTORY, "family-1", ConcreteFactory1)
    registry.register(PatternKind.FACTORY, "family-2", ConcreteFactory2)
    registry.register(PatternKind.BUILDER, "builder-1", ConcreteBuilder1)
    registry.register(PatternKind.VISITOR, "visitor-1", ConcreteVisitor1)
    registry.register(PatternKind.VISITOR, "visitor-2", ConcreteVisitor2)
    return registry
