"""Single-line declaration matching.

Recognizes function and class declarations one line at a time. Parameter
lists are split on commas without tracking nesting, so a ``)`` inside a
default value or type annotation cuts the list short.
"""
import re
from typing import Dict, List, Optional, Tuple, Union

from auto_doc_generator.constants import DeclarationPatterns
from auto_doc_generator.core.config import resolve_language_family
from auto_doc_generator.models.documentation import Declaration, DeclarationKind, LanguageFamily

# (function pattern, class pattern) per family
_PATTERNS: Dict[LanguageFamily, Tuple[re.Pattern, re.Pattern]] = {
    LanguageFamily.PYTHON: (
        re.compile(DeclarationPatterns.PYTHON_FUNCTION),
        re.compile(DeclarationPatterns.CLASS),
    ),
    LanguageFamily.JAVASCRIPT: (
        re.compile(DeclarationPatterns.JAVASCRIPT_FUNCTION),
        re.compile(DeclarationPatterns.CLASS),
    ),
}


def split_parameters(params_str: str) -> List[str]:
    """Split a raw parameter list on commas.

    Each piece is stripped and empty pieces are dropped, which covers both
    ``()`` and a trailing comma.
    """
    return [p.strip() for p in params_str.split(",") if p.strip()]


def match_declaration(
    line: str,
    language: Union[str, LanguageFamily, None],
    line_number: int = 0,
) -> Optional[Declaration]:
    """Classify a line as a function declaration, a class declaration, or neither.

    The function pattern is tried first.

    Args:
        line: Text of one source line
        language: Language id or family of the buffer
        line_number: Line index recorded on the returned declaration

    Returns:
        The declaration, or None when the line declares nothing
    """
    family = resolve_language_family(language)
    if family is None:
        return None

    func_pattern, class_pattern = _PATTERNS[family]

    func_match = func_pattern.match(line)
    if func_match:
        return Declaration(
            kind=DeclarationKind.FUNCTION,
            name=func_match.group(1),
            parameters=split_parameters(func_match.group(2)),
            line_number=line_number,
        )

    class_match = class_pattern.match(line)
    if class_match:
        return Declaration(
            kind=DeclarationKind.CLASS,
            name=class_match.group(1),
            parameters=[],
            line_number=line_number,
        )

    return None
