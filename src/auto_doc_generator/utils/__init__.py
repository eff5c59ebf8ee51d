"""Utilities module for auto-doc-generator."""

from .console_logger import ConsoleLogger, console

__all__ = ["ConsoleLogger", "console"]
