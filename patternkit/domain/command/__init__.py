"""Command - deferred, parameterized actions and the invoker that triggers them."""

from .commands import Command, ComplexCommand, SimpleCommand
from .invoker import Invoker
from .receiver import Receiver

__all__ = [
    "Command",
    "SimpleCommand",
    "ComplexCommand",
    "Invoker",
    "Receiver",
]
