"""Documentation template feature module.

This module provides tools for:
- Matching function and class declarations on single lines
- Rendering docstring (Python) and JSDoc (JavaScript/TypeScript) templates
- Inserting templates above undocumented declarations with matching indentation
- Backing up files before they are rewritten
"""

from .applier import apply_insertion
from .buffer import TextBuffer
from .docstring_generator import generate_docstrings_for_buffer, generate_docstrings_for_file
from .matcher import match_declaration
from .templates import render_template

__all__ = [
    "TextBuffer",
    "apply_insertion",
    "generate_docstrings_for_buffer",
    "generate_docstrings_for_file",
    "match_declaration",
    "render_template",
]
