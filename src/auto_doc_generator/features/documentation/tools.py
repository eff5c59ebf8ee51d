"""MCP tool definitions for documentation template generation.

This module registers MCP tools for:
- generate_docstrings_for_file: Insert templates above undocumented declarations
- preview_docstring: Render the template for a single declaration line
"""

import time
from typing import Any, Dict, Optional

import sentry_sdk
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from auto_doc_generator.core.config import resolve_language_family
from auto_doc_generator.core.exceptions import UnsupportedLanguageError
from auto_doc_generator.core.logging import get_logger
from auto_doc_generator.features.documentation.docstring_generator import generate_docstrings_for_file
from auto_doc_generator.features.documentation.matcher import match_declaration
from auto_doc_generator.features.documentation.templates import render_template

# =============================================================================
# Tool Implementations
# =============================================================================


def generate_docstrings_for_file_tool(
    file_path: str,
    language: Optional[str] = None,
    dry_run: bool = False,
    backup: bool = False,
) -> Dict[str, Any]:
    """
    Insert docstring/JSDoc templates above undocumented functions and classes.

    Each line of the file is matched against a function pattern and a class
    pattern for the file's language. Declarations with a doc-comment marker
    in the two lines above them are left alone; every other declaration gets
    a template inserted directly above it, indented like the declaration.

    **Languages:**
    - `python`: triple-quote block with `:param name:` and `:return:` fields
    - `javascript`, `typescript`: `/** ... */` block with `@param {any}` and `@returns {any}` tags

    Args:
        file_path: Path to the source file (absolute path)
        language: Language id; detected from the file extension when omitted
        dry_run: If True, only preview the templates without writing the file
        backup: If True, back the file up before rewriting it

    Returns:
        Dictionary containing:
        - message: Completion message
        - summary: Counts of declarations found, documented, inserted and failed
        - insertions: Planned templates with their line numbers
        - failures: Insertions that could not be applied

    Example usage:
        result = generate_docstrings_for_file(
            file_path="/path/to/module.py",
            dry_run=True
        )
    """
    logger = get_logger("tool.generate_docstrings_for_file")
    start_time = time.time()

    logger.info(
        "tool_invoked",
        tool="generate_docstrings_for_file",
        file_path=file_path,
        language=language,
        dry_run=dry_run,
    )

    try:
        result = generate_docstrings_for_file(
            file_path=file_path,
            language=language,
            dry_run=dry_run,
            backup=backup,
        )

        execution_time = time.time() - start_time

        logger.info(
            "tool_completed",
            tool="generate_docstrings_for_file",
            execution_time_seconds=round(execution_time, 3),
            declarations_found=result.declarations_found,
            inserted=result.inserted,
        )

        return {
            "message": result.message,
            "summary": {
                "language": result.language,
                "declarations_found": result.declarations_found,
                "already_documented": result.already_documented,
                "planned": len(result.insertions),
                "inserted": result.inserted,
                "failed": len(result.failures),
                "dry_run": result.dry_run,
            },
            "insertions": [
                {
                    "name": p.declaration.name,
                    "kind": p.declaration.kind.value,
                    "line_number": p.line_number + 1,
                    "template": p.template,
                }
                for p in result.insertions
            ],
            "failures": [
                {
                    "name": f.name,
                    "line_number": f.line_number + 1,
                    "error": f.error,
                }
                for f in result.failures
            ],
            "file_modified": result.file_modified,
            "backup_id": result.backup_id,
            "execution_time_ms": result.execution_time_ms,
        }

    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            "tool_failed",
            tool="generate_docstrings_for_file",
            execution_time_seconds=round(execution_time, 3),
            error=str(e)[:200],
        )
        sentry_sdk.capture_exception(e)
        raise


def preview_docstring_tool(line: str, language: str) -> Dict[str, Any]:
    """
    Render the template a single declaration line would receive.

    Args:
        line: One line of source code, e.g. "def greet(name, age):"
        language: Language id (python, javascript, typescript)

    Returns:
        Dictionary containing:
        - declaration: Matched kind, name and parameters, or None
        - template: Rendered template ("" when the line declares nothing)
    """
    if resolve_language_family(language) is None:
        raise UnsupportedLanguageError(language)

    declaration = match_declaration(line, language)
    if declaration is None:
        return {"declaration": None, "template": ""}

    return {
        "declaration": {
            "kind": declaration.kind.value,
            "name": declaration.name,
            "parameters": declaration.parameters,
        },
        "template": render_template(language, declaration.name, declaration.parameters),
    }


# =============================================================================
# MCP Registration
# =============================================================================


def _create_mcp_field_definitions() -> Dict[str, Dict[str, Any]]:
    """Create field definitions for MCP tool registration."""
    return {
        "generate_docstrings_for_file": {
            "file_path": Field(description="Path to the source file (absolute path)"),
            "language": Field(default=None, description="Language id (python, javascript, typescript); detected from the extension when omitted"),
            "dry_run": Field(default=False, description="If True, only preview the templates without writing the file"),
            "backup": Field(default=False, description="If True, back the file up before rewriting it"),
        },
        "preview_docstring": {
            "line": Field(description="One line of source code containing a declaration"),
            "language": Field(description="Language id (python, javascript, typescript)"),
        },
    }


def register_documentation_tools(mcp: FastMCP) -> None:
    """Register all documentation feature tools with MCP server.

    Args:
        mcp: FastMCP server instance
    """
    fields = _create_mcp_field_definitions()

    @mcp.tool()
    def generate_docstrings_for_file(
        file_path: str = fields["generate_docstrings_for_file"]["file_path"],
        language: Optional[str] = fields["generate_docstrings_for_file"]["language"],
        dry_run: bool = fields["generate_docstrings_for_file"]["dry_run"],
        backup: bool = fields["generate_docstrings_for_file"]["backup"],
    ) -> Dict[str, Any]:
        """Insert docstring/JSDoc templates above undocumented functions and classes."""
        return generate_docstrings_for_file_tool(
            file_path=file_path,
            language=language,
            dry_run=dry_run,
            backup=backup,
        )

    @mcp.tool()
    def preview_docstring(
        line: str = fields["preview_docstring"]["line"],
        language: str = fields["preview_docstring"]["language"],
    ) -> Dict[str, Any]:
        """Render the template a single declaration line would receive."""
        return preview_docstring_tool(line=line, language=language)
