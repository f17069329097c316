"""Invoker - holds command slots and triggers them around its main action."""
from typing import Optional

from patternkit.domain.base.ports import OutputPort
from patternkit.domain.command.commands import Command
from patternkit.infrastructure.adapters.output_adapters import LoggingOutputAdapter
from patternkit.infrastructure.logging import get_logger


class Invoker:
    """
    Runs on-start, then its own work, then on-finish.

    Each slot is optional; an empty slot is skipped. Slots can be replaced
    at any time before ``do_something_important``. Not safe for concurrent
    mutation without external synchronization.
    """

    def __init__(self, output: Optional[OutputPort] = None):
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None
        self._output = output or LoggingOutputAdapter()
        self.logger = get_logger(__name__)

    @property
    def on_start(self) -> Optional[Command]:
        return self._on_start

    @property
    def on_finish(self) -> Optional[Command]:
        return self._on_finish

    def set_on_start(self, command: Optional[Command]) -> None:
        """Assign the on-start slot; None clears it."""
        self._on_start = command

    def set_on_finish(self, command: Optional[Command]) -> None:
        """Assign the on-finish slot; None clears it."""
        self._on_finish = command

    def do_something_important(self) -> None:
        """Execute on-start, the main action, then on-finish."""
        self._output.write("Invoker: Does anybody want something done before I begin?")
        self._run_slot("on_start", self._on_start)

        self._output.write("Invoker: ...doing something really important...")

        self._output.write("Invoker: Does anybody want something done after I finish?")
        self._run_slot("on_finish", self._on_finish)

    def _run_slot(self, slot: str, command: Optional[Command]) -> None:
        if command is None:
            self.logger.debug("Slot empty, skipping", slot=slot)
            return
        self.logger.debug("Executing slot", slot=slot, command=repr(command))
        command.execute()
