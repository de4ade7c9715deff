"""Concrete `Reporter` implementations."""

from .memory import MemoryReporter, RenderedSuite
from .rich_console import RichReporter

__all__ = ["MemoryReporter", "RenderedSuite", "RichReporter"]
