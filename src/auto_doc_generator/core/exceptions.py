"""Exception hierarchy for auto-doc-generator."""
from typing import Optional


class AutoDocError(Exception):
    """Base class for all auto-doc-generator errors."""
    pass


class NoActiveFileError(AutoDocError):
    """Raised when there is no file to process."""

    def __init__(self, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        if file_path:
            message = f"No active file found: {file_path}"
        else:
            message = "No active file found."
        super().__init__(message)


class UnsupportedLanguageError(AutoDocError):
    """Raised when a language id maps to neither supported family."""

    def __init__(self, language: Optional[str], file_path: Optional[str] = None) -> None:
        self.language = language
        self.file_path = file_path
        message = f"Unsupported language: {language or 'unknown'}"
        if file_path:
            message += f" ({file_path})"
        super().__init__(message)


class EditApplicationError(AutoDocError):
    """Raised when an insertion cannot be applied to a buffer.

    The buffer is left untouched when this is raised.
    """

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Cannot insert at line {line_number + 1}: {reason}")


class ConfigurationError(AutoDocError):
    """Raised when the configuration file is invalid."""

    def __init__(self, config_path: str, reason: str) -> None:
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Invalid configuration file '{config_path}': {reason}")
