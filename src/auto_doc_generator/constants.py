"""Shared constants across the auto-doc-generator codebase.

This module centralizes the regex shapes, doc markers and language
mappings used by the matcher, template builder and orchestration loop.
"""


class LanguageIds:
    """Language identifiers accepted on the command line and by the MCP tool."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVASCRIPT_REACT = "javascriptreact"
    TYPESCRIPT_REACT = "typescriptreact"


class TemplateDefaults:
    """Placeholder tokens written into generated templates."""

    PLACEHOLDER = "DESCRIPTION"
    PARAM_TYPE = "any"
    RETURN_TYPE = "any"


class DetectionDefaults:
    """Settings for the "already documented" heuristic."""

    # Number of lines above a declaration searched for a doc marker
    LOOKBEHIND_LINES = 2

    PYTHON_DOC_MARKERS = ('"""', "'''")
    JSDOC_DOC_MARKERS = ("/**",)
    # A block ending in the window counts only when it was opened with "/**"
    BLOCK_COMMENT_OPEN = "/*"
    BLOCK_COMMENT_CLOSE = "*/"


class DeclarationPatterns:
    """Single-line declaration regexes, one pair per language family."""

    PYTHON_FUNCTION = r"^\s*def\s+(\w+)\s*\(([^)]*)\)"
    JAVASCRIPT_FUNCTION = r"^\s*function\s+(\w+)\s*\(([^)]*)\)"
    CLASS = r"^\s*class\s+(\w+)"
    INDENT = r"^([ \t]*)"


class FileDefaults:
    """Defaults for reading and writing source files."""

    ENCODING = "utf-8"
    BACKUP_DIR = ".auto-doc-backups"
    METADATA_FILE = "backup-metadata.json"

    # Built-in extension -> language id map, extended by the config file
    EXTENSIONS = {
        ".py": LanguageIds.PYTHON,
        ".pyw": LanguageIds.PYTHON,
        ".js": LanguageIds.JAVASCRIPT,
        ".mjs": LanguageIds.JAVASCRIPT,
        ".cjs": LanguageIds.JAVASCRIPT,
        ".jsx": LanguageIds.JAVASCRIPT_REACT,
        ".ts": LanguageIds.TYPESCRIPT,
        ".mts": LanguageIds.TYPESCRIPT,
        ".cts": LanguageIds.TYPESCRIPT,
        ".tsx": LanguageIds.TYPESCRIPT_REACT,
    }


class Messages:
    """User-facing completion messages."""

    COMPLETED = "Docstrings inserted for all functions/classes in file!"
    NOTHING_TO_INSERT = "No undocumented functions/classes found in file."
    NO_ACTIVE_FILE = "No active file found."


class FormattingDefaults:
    """Console formatting defaults."""

    SEPARATOR_LENGTH = 60
