"""Adapters implementing domain ports."""

from .output_adapters import LoggingOutputAdapter, MemoryOutputAdapter

__all__ = ["LoggingOutputAdapter", "MemoryOutputAdapter"]
