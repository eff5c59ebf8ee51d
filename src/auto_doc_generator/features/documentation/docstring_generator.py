"""Docstring generation service.

This module drives the scan-and-edit pass: it finds declarations line by
line, skips those that already look documented, and inserts a template
above the rest.

The pass runs in two phases. Planning reads the buffer once and records
every undocumented declaration against the original line numbers.
Applying then inserts the templates bottom-up, so an insertion never
shifts a line that is still waiting for its own template.
"""
import os
import time
from typing import List, Optional, Tuple, Union

import sentry_sdk

from auto_doc_generator.constants import DetectionDefaults, Messages
from auto_doc_generator.core.config import detect_language, resolve_language_family
from auto_doc_generator.core.exceptions import EditApplicationError, NoActiveFileError, UnsupportedLanguageError
from auto_doc_generator.core.logging import get_logger
from auto_doc_generator.features.documentation.applier import apply_insertion
from auto_doc_generator.features.documentation.backup import create_backup
from auto_doc_generator.features.documentation.buffer import TextBuffer
from auto_doc_generator.features.documentation.matcher import match_declaration
from auto_doc_generator.features.documentation.templates import render_template
from auto_doc_generator.models.documentation import (
    Declaration,
    DocstringGenerationResult,
    InsertionFailure,
    LanguageFamily,
    PlannedInsertion,
)

logger = get_logger(__name__)

_DOC_MARKERS = {
    LanguageFamily.PYTHON: DetectionDefaults.PYTHON_DOC_MARKERS,
    LanguageFamily.JAVASCRIPT: DetectionDefaults.JSDOC_DOC_MARKERS,
}


# =============================================================================
# Planning
# =============================================================================

def _closes_jsdoc_block(buffer: TextBuffer, line_number: int) -> bool:
    """Check whether the block comment ending on ``line_number`` opened with ``/**``.

    Scans upward from the last ``*/`` on the line to the nearest ``/*``.
    """
    open_token = DetectionDefaults.BLOCK_COMMENT_OPEN
    close_token = DetectionDefaults.BLOCK_COMMENT_CLOSE

    text = buffer.line_at(line_number)
    head = text[:text.rfind(close_token)]
    idx = line_number
    while True:
        start = head.rfind(open_token)
        if head.rfind(close_token) > start:
            # Reached the end of an earlier block before finding an opener
            return False
        if start != -1:
            return head.startswith(DetectionDefaults.JSDOC_DOC_MARKERS[0], start)
        idx -= 1
        if idx < 0:
            return False
        head = buffer.line_at(idx)


def has_doc_marker(buffer: TextBuffer, line_number: int, family: LanguageFamily) -> bool:
    """Check the lines just above a declaration for a doc-comment marker.

    Only the ``LOOKBEHIND_LINES`` lines preceding ``line_number`` are
    searched; the declaration line itself is not. This is a substring
    heuristic: an unrelated comment containing a marker counts, and a doc
    block further up (past decorators, say) does not. For JavaScript the
    end of a ``/** ... */`` block also counts, so a multi-line JSDoc block
    written by an earlier run is recognised.
    """
    markers = _DOC_MARKERS[family]
    start = max(0, line_number - DetectionDefaults.LOOKBEHIND_LINES)
    for idx in range(start, line_number):
        text = buffer.line_at(idx)
        if any(marker in text for marker in markers):
            return True
        if (
            family is LanguageFamily.JAVASCRIPT
            and DetectionDefaults.BLOCK_COMMENT_CLOSE in text
            and _closes_jsdoc_block(buffer, idx)
        ):
            return True
    return False


def plan_insertions(
    buffer: TextBuffer,
    family: LanguageFamily,
) -> Tuple[List[Declaration], int, List[PlannedInsertion]]:
    """Find every undocumented declaration without touching the buffer.

    The line count is read once up front and every original line is
    visited exactly once.

    Returns:
        Tuple of (declarations found, number already documented, planned insertions)
    """
    declarations: List[Declaration] = []
    planned: List[PlannedInsertion] = []
    already_documented = 0

    total_lines = buffer.line_count
    for line_number in range(total_lines):
        declaration = match_declaration(buffer.line_at(line_number), family, line_number)
        if declaration is None:
            continue

        declarations.append(declaration)

        if has_doc_marker(buffer, line_number, family):
            already_documented += 1
            logger.debug("declaration_already_documented", name=declaration.name, line=line_number + 1)
            continue

        template = render_template(family, declaration.name, declaration.parameters)
        if template:
            planned.append(PlannedInsertion(declaration=declaration, template=template))

    return declarations, already_documented, planned


# =============================================================================
# Applying
# =============================================================================

def apply_planned_insertions(
    buffer: TextBuffer,
    planned: List[PlannedInsertion],
) -> Tuple[int, List[InsertionFailure]]:
    """Insert planned templates from the bottom of the buffer up.

    A failed insertion is logged and recorded; the remaining ones are
    still attempted.

    Returns:
        Tuple of (number inserted, failures)
    """
    inserted = 0
    failures: List[InsertionFailure] = []

    for insertion in sorted(planned, key=lambda p: p.line_number, reverse=True):
        try:
            apply_insertion(buffer, insertion.line_number, insertion.template)
        except EditApplicationError as e:
            logger.warning(
                "insertion_failed",
                name=insertion.declaration.name,
                line=insertion.line_number + 1,
                error=str(e),
            )
            sentry_sdk.capture_exception(e)
            failures.append(InsertionFailure(
                line_number=insertion.line_number,
                name=insertion.declaration.name,
                error=str(e),
            ))
            continue

        inserted += 1
        logger.debug("docstring_inserted", name=insertion.declaration.name, line=insertion.line_number + 1)

    # Report in source order
    failures.reverse()
    return inserted, failures


def _completion_message(planned: int, inserted: int, failures: int, dry_run: bool) -> str:
    if dry_run:
        return f"{planned} docstring(s) would be inserted (dry run)."
    if failures:
        return f"{Messages.COMPLETED} ({inserted} inserted, {failures} failed)"
    if not planned:
        return Messages.NOTHING_TO_INSERT
    return Messages.COMPLETED


# =============================================================================
# Main Generator
# =============================================================================

def generate_docstrings_for_buffer(
    buffer: TextBuffer,
    language: Union[str, LanguageFamily],
    dry_run: bool = False,
) -> DocstringGenerationResult:
    """Insert templates above every undocumented declaration in a buffer.

    Args:
        buffer: Buffer to scan and edit in place
        language: Language id or family of the buffer
        dry_run: If True, only plan the insertions

    Returns:
        DocstringGenerationResult describing the pass

    Raises:
        UnsupportedLanguageError: If the language maps to no family
    """
    start_time = time.time()

    family = resolve_language_family(language)
    language_id = language.value if isinstance(language, LanguageFamily) else language
    if family is None:
        raise UnsupportedLanguageError(language_id, buffer.file_path)

    logger.info(
        "generate_docstrings_started",
        file_path=buffer.file_path,
        language=language_id,
        total_lines=buffer.line_count,
        dry_run=dry_run,
    )

    declarations, already_documented, planned = plan_insertions(buffer, family)

    inserted = 0
    failures: List[InsertionFailure] = []
    if not dry_run:
        inserted, failures = apply_planned_insertions(buffer, planned)

    execution_time = int((time.time() - start_time) * 1000)

    logger.info(
        "generate_docstrings_completed",
        file_path=buffer.file_path,
        declarations_found=len(declarations),
        already_documented=already_documented,
        planned=len(planned),
        inserted=inserted,
        failed=len(failures),
        execution_time_ms=execution_time,
    )

    return DocstringGenerationResult(
        language=language_id,
        declarations_found=len(declarations),
        already_documented=already_documented,
        insertions=planned,
        inserted=inserted,
        failures=failures,
        dry_run=dry_run,
        file_path=buffer.file_path,
        message=_completion_message(len(planned), inserted, len(failures), dry_run),
        execution_time_ms=execution_time,
    )


def generate_docstrings_for_file(
    file_path: Optional[str],
    language: Optional[str] = None,
    dry_run: bool = False,
    backup: bool = False,
) -> DocstringGenerationResult:
    """Insert templates into a source file on disk.

    The file is only rewritten when at least one template was inserted.

    Args:
        file_path: File to process
        language: Language id; detected from the file extension when omitted
        dry_run: If True, report what would be inserted without writing
        backup: If True, back the file up before rewriting it

    Returns:
        DocstringGenerationResult describing the pass

    Raises:
        NoActiveFileError: If there is no file at ``file_path``
        UnsupportedLanguageError: If the language cannot be determined or is unsupported
    """
    if not file_path or not os.path.isfile(file_path):
        logger.warning("no_active_file", file_path=file_path)
        raise NoActiveFileError(file_path)

    language = language or detect_language(file_path)
    if resolve_language_family(language) is None:
        raise UnsupportedLanguageError(language, file_path)

    buffer = TextBuffer.from_file(file_path)
    result = generate_docstrings_for_buffer(buffer, language, dry_run=dry_run)

    if not dry_run and result.inserted:
        if backup:
            result.backup_id = create_backup(file_path)
        try:
            buffer.save()
        except OSError as e:
            logger.error("file_write_error", file_path=file_path, error=str(e))
            sentry_sdk.capture_exception(e)
            raise
        result.file_modified = True

    return result
