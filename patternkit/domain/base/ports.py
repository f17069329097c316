"""Domain ports - boundaries the core writes its side effects through."""
from typing import Protocol


class OutputPort(Protocol):
    """Port for the messages produced by side-effecting operations."""

    def write(self, message: str) -> None:
        """Write a single message."""
        ...
