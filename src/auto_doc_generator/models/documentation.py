"""Data models for docstring template generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LanguageFamily(Enum):
    """Supported language families.

    PYTHON covers whitespace-delimited sources documented with triple-quote
    blocks. JAVASCRIPT covers brace-delimited sources documented with
    ``/** ... */`` blocks.
    """

    PYTHON = "python"
    JAVASCRIPT = "javascript"


class DeclarationKind(Enum):
    """Kind of declaration recognized on a single line."""

    FUNCTION = "function"
    CLASS = "class"


@dataclass
class Declaration:
    """A function or class declaration found on one line.

    Attributes:
        kind: Function or class
        name: Declared identifier
        parameters: Parameter names in source order (always empty for classes)
        line_number: Line the declaration was found on (0-indexed)
    """

    kind: DeclarationKind
    name: str
    parameters: List[str] = field(default_factory=list)
    line_number: int = 0


@dataclass
class PlannedInsertion:
    """A template scheduled for insertion above a declaration.

    Attributes:
        declaration: The undocumented declaration
        template: Rendered, unindented template text
    """

    declaration: Declaration
    template: str

    @property
    def line_number(self) -> int:
        return self.declaration.line_number


@dataclass
class InsertionFailure:
    """An insertion that could not be applied."""

    line_number: int
    name: str
    error: str


@dataclass
class DocstringGenerationResult:
    """Result of one scan-and-edit pass over a buffer.

    Attributes:
        language: Language id the buffer was processed as
        declarations_found: Declarations recognized in the buffer
        already_documented: Declarations skipped because a doc marker was found
        insertions: Templates planned for insertion, in original line order
        inserted: Number of templates actually inserted
        failures: Insertions that failed to apply
        dry_run: Whether this was a preview only
        file_path: Source file, when the buffer came from disk
        file_modified: Whether the file on disk was rewritten
        backup_id: Backup identifier, if a backup was taken
        message: Human-readable completion message
        execution_time_ms: Execution time in milliseconds
    """

    language: str
    declarations_found: int
    already_documented: int
    insertions: List[PlannedInsertion]
    inserted: int = 0
    failures: List[InsertionFailure] = field(default_factory=list)
    dry_run: bool = False
    file_path: Optional[str] = None
    file_modified: bool = False
    backup_id: Optional[str] = None
    message: str = ""
    execution_time_ms: int = 0
