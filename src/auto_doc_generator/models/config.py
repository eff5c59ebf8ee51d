"""Configuration data models."""
from typing import Dict, Optional

from pydantic import BaseModel, field_validator

from auto_doc_generator.models.documentation import LanguageFamily


class AutoDocConfig(BaseModel):
    """Pydantic model for the auto-doc YAML configuration file.

    Both maps extend the built-in defaults rather than replacing them.
    """

    extensions: Optional[Dict[str, str]] = None
    languages: Optional[Dict[str, str]] = None

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        """Ensure extensions start with a dot."""
        if v is None:
            return v
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"Extension '{ext}' must start with '.'")
        return {ext.lower(): language for ext, language in v.items()}

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        """Ensure every language id maps to a known family."""
        if v is None:
            return v
        valid = {family.value for family in LanguageFamily}
        for language, family in v.items():
            if family not in valid:
                raise ValueError(
                    f"Language '{language}' maps to unknown family '{family}' (expected one of {sorted(valid)})"
                )
        return {language.lower(): family for language, family in v.items()}
