"""Insertion of rendered templates into a buffer."""
import re

from auto_doc_generator.constants import DeclarationPatterns
from auto_doc_generator.core.logging import get_logger
from auto_doc_generator.features.documentation.buffer import TextBuffer

logger = get_logger(__name__)

_INDENT_PATTERN = re.compile(DeclarationPatterns.INDENT)


def get_indent(line: str) -> str:
    """Return the leading run of spaces and tabs of a line."""
    match = _INDENT_PATTERN.match(line)
    return match.group(1) if match else ""


def indent_template(template: str, indent: str) -> str:
    """Prefix every physical line of a template with ``indent``."""
    return indent + template.replace("\n", "\n" + indent)


def apply_insertion(buffer: TextBuffer, target_line: int, template: str) -> int:
    """Insert a template immediately above a line, matching its indentation.

    The block plus one line break goes in at column 0 of ``target_line``,
    so the original line follows the block unchanged. Either the whole
    block is inserted or nothing is.

    Args:
        buffer: Buffer to edit
        target_line: Line the template documents (0-indexed)
        template: Rendered, unindented template

    Returns:
        Number of lines inserted (0 for an empty template)

    Raises:
        EditApplicationError: If the buffer rejects the edit
    """
    if not template:
        return 0

    indent = get_indent(buffer.line_at(target_line)) if 0 <= target_line < buffer.line_count else ""
    block = indent_template(template, indent) + "\n"
    added = buffer.insert(target_line, block)

    logger.debug("template_inserted", line=target_line + 1, lines_added=added, indent_width=len(indent))
    return added
