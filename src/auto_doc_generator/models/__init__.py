"""Data models for auto-doc-generator."""

from auto_doc_generator.models.config import AutoDocConfig
from auto_doc_generator.models.documentation import (
    Declaration,
    DeclarationKind,
    DocstringGenerationResult,
    InsertionFailure,
    LanguageFamily,
    PlannedInsertion,
)

__all__ = [
    # Config models
    "AutoDocConfig",
    # Documentation models
    "Declaration",
    "DeclarationKind",
    "DocstringGenerationResult",
    "InsertionFailure",
    "LanguageFamily",
    "PlannedInsertion",
]
