"""Console output for the command-line entry point.

Structured logs go to stderr through structlog; this module prints the
human-readable messages a person running ``auto-doc`` reads.

Usage:
    from auto_doc_generator.utils.console_logger import console

    console.success("Docstrings inserted for all functions/classes in file!")
    console.error("No active file found.")
    console.json({"inserted": 3})
"""

import json
import sys
from typing import Any, Dict, Optional

from auto_doc_generator.constants import FormattingDefaults


class ConsoleLogger:
    """print() replacement with a quiet switch."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet

    def set_quiet(self, quiet: bool) -> None:
        self.quiet = quiet

    def log(self, message: str = "", **kwargs: Any) -> None:
        """Output a normal message unless quiet."""
        if not self.quiet:
            print(message, **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        if not self.quiet:
            print(f"✓ {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Output an error message to stderr, even when quiet."""
        print(f"ERROR: {message}", file=sys.stderr, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Output a warning message to stderr, even when quiet."""
        print(f"WARNING: {message}", file=sys.stderr, **kwargs)

    def json(self, data: Dict[str, Any], indent: Optional[int] = 2, **kwargs: Any) -> None:
        """Output data as JSON for programmatic consumption."""
        if not self.quiet:
            print(json.dumps(data, indent=indent), **kwargs)

    def separator(self, char: str = "=", length: int = FormattingDefaults.SEPARATOR_LENGTH, **kwargs: Any) -> None:
        if not self.quiet:
            print(char * length, **kwargs)

    def header(self, message: str, **kwargs: Any) -> None:
        """Output a header between separator lines."""
        if not self.quiet:
            self.separator()
            print(message, **kwargs)
            self.separator()


# Global console logger instance
console = ConsoleLogger()
