"""
Commands - deferred actions built eagerly, executed later.

A command captures everything it needs at construction. Constructing one
has no side effects; ``execute`` runs the action each time it is called,
with no retry.
"""
from abc import ABC, abstractmethod
from typing import Optional

from patternkit.domain.base.ports import OutputPort
from patternkit.domain.command.receiver import Receiver
from patternkit.infrastructure.adapters.output_adapters import LoggingOutputAdapter
from patternkit.infrastructure.logging import get_logger


class Command(ABC):
    """Interface for executable commands."""

    @abstractmethod
    def execute(self) -> None:
        """Run the encapsulated action."""


class SimpleCommand(Command):
    """Self-contained command holding only a literal payload."""

    def __init__(self, payload: str, output: Optional[OutputPort] = None):
        self._payload = payload
        self._output = output or LoggingOutputAdapter()

    @property
    def payload(self) -> str:
        return self._payload

    def execute(self) -> None:
        self._output.write(
            f"SimpleCommand: See, I can do simple things like printing ({self._payload})"
        )

    def __repr__(self) -> str:
        return f"SimpleCommand(payload={self._payload!r})"


class ComplexCommand(Command):
    """Command that delegates its work to a receiver with captured parameters."""

    def __init__(
        self,
        receiver: Receiver,
        a: str,
        b: str,
        output: Optional[OutputPort] = None,
    ):
        """
        Initialize complex command.

        Args:
            receiver: Receiver performing the primitive operations
            a: Argument for ``receiver.do_something``
            b: Argument for ``receiver.do_something_else``
            output: Port for the command's own message; defaults to logging
        """
        self._receiver = receiver
        self._a = a
        self._b = b
        self._output = output or LoggingOutputAdapter()
        self.logger = get_logger(__name__)

    @property
    def receiver(self) -> Receiver:
        return self._receiver

    def execute(self) -> None:
        self.logger.debug("Delegating to receiver", a=self._a, b=self._b)
        self._output.write("ComplexCommand: Complex stuff should be done by a receiver object.")
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)

    def __repr__(self) -> str:
        return f"ComplexCommand(a={self._a!r}, b={self._b!r})"
