"""Docstring and JSDoc templates.

Templates are unindented and use ``\\n`` as the only line separator; the
applier adapts them to the target line.
"""
from typing import Callable, Dict, List, Union

from auto_doc_generator.constants import TemplateDefaults
from auto_doc_generator.core.config import resolve_language_family
from auto_doc_generator.models.documentation import LanguageFamily

PLACEHOLDER = TemplateDefaults.PLACEHOLDER


def _render_python_docstring(name: str, parameters: List[str]) -> str:
    """Render a reST-style triple-quote block."""
    lines = [f'"""{name} description.']
    if parameters:
        lines.append("")
        for param in parameters:
            lines.append(f":param {param}: {PLACEHOLDER}")
    lines.append(f":return: {PLACEHOLDER}")
    lines.append('"""')
    return "\n".join(lines)


def _render_jsdoc(name: str, parameters: List[str]) -> str:
    """Render a ``/** ... */`` block."""
    lines = ["/**", f" * {name} description."]
    for param in parameters:
        lines.append(f" * @param {{{TemplateDefaults.PARAM_TYPE}}} {param} {PLACEHOLDER}")
    lines.append(f" * @returns {{{TemplateDefaults.RETURN_TYPE}}} {PLACEHOLDER}")
    lines.append(" */")
    return "\n".join(lines)


_RENDERERS: Dict[LanguageFamily, Callable[[str, List[str]], str]] = {
    LanguageFamily.PYTHON: _render_python_docstring,
    LanguageFamily.JAVASCRIPT: _render_jsdoc,
}


def render_template(
    language: Union[str, LanguageFamily, None],
    name: str,
    parameters: List[str],
) -> str:
    """Render the doc-comment template for one declaration.

    Args:
        language: Language id or family
        name: Declared name
        parameters: Parameter names in source order

    Returns:
        The template text, or an empty string for unsupported languages
    """
    family = resolve_language_family(language)
    if family is None:
        return ""
    return _RENDERERS[family](name, list(parameters))
