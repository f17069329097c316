"""patternkit - Root Package.

Reference library for five classic design patterns: Factory Method,
Abstract Factory, Builder, Visitor and Command. Each pattern lets a caller
work with interchangeable implementations through an abstract contract
instead of a concrete type.

Key Components:
    - domain: the pattern modules and the shared exception hierarchy
    - infrastructure: structured logging, output adapters, variant registry
    - config: configuration schemas for the ambient concerns

Note:
    The library is synchronous and deterministic. Stateful objects
    (builders, directors, invokers) are not designed for concurrent
    mutation from multiple threads without external synchronization.
"""

from ._version import __version__
from ._package import PACKAGE_NAME

__package_name__ = PACKAGE_NAME
