"""Output port adapters.

MemoryOutputAdapter keeps an unsynchronized list; share one instance
across threads only with external locking.
"""
from typing import Any, List, Optional

from patternkit.infrastructure.logging import get_logger


class LoggingOutputAdapter:
    """Writes each message as a structlog info event."""

    def __init__(self, logger: Optional[Any] = None):
        self._logger = logger or get_logger("patternkit.output")

    def write(self, message: str) -> None:
        """Write a single message."""
        self._logger.info(message)


class MemoryOutputAdapter:
    """Records messages in write order."""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, message: str) -> None:
        """Write a single message."""
        self.lines.append(message)

    def clear(self) -> None:
        """Forget all recorded messages."""
        self.lines.clear()

    def __repr__(self) -> str:
        return f"MemoryOutputAdapter(lines={len(self.lines)})"
