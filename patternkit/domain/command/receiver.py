"""Receiver - performs the primitive operations complex commands delegate to."""
from typing import Optional

from patternkit.domain.base.ports import OutputPort
from patternkit.infrastructure.adapters.output_adapters import LoggingOutputAdapter


class Receiver:
    """
    Executes primitive operations by writing to its output port.

    Holds no state between calls beyond the port, so one receiver can be
    shared by many commands.
    """

    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output or LoggingOutputAdapter()

    def do_something(self, a: str) -> None:
        self.output.write(f"Receiver: Working on ({a})")

    def do_something_else(self, b: str) -> None:
        self.output.write(f"Receiver: Also working on ({b})")
