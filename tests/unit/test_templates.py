"""Tests for docstring and JSDoc template rendering."""

from auto_doc_generator.features.documentation.templates import render_template
from auto_doc_generator.models.documentation import LanguageFamily


class TestPythonTemplate:
    """Tests for triple-quote templates."""

    def test_function_with_parameters(self):
        """Test the exact template for a two-parameter function."""
        assert render_template("python", "greet", ["name", "age"]) == (
            '"""greet description.\n'
            "\n"
            ":param name: DESCRIPTION\n"
            ":param age: DESCRIPTION\n"
            ":return: DESCRIPTION\n"
            '"""'
        )

    def test_no_parameters_collapses_param_block(self):
        """Test a zero-parameter template has no dangling blank line."""
        assert render_template("python", "run", []) == (
            '"""run description.\n'
            ":return: DESCRIPTION\n"
            '"""'
        )

    def test_parameter_order_preserved(self):
        """Test :param lines follow input order."""
        template = render_template(LanguageFamily.PYTHON, "f", ["z", "a", "m"])
        lines = template.split("\n")
        assert lines[2:5] == [":param z: DESCRIPTION", ":param a: DESCRIPTION", ":param m: DESCRIPTION"]


class TestJSDocTemplate:
    """Tests for /** ... */ templates."""

    def test_function_with_parameters(self):
        """Test the exact template for a two-parameter function."""
        assert render_template("javascript", "add", ["a", "b"]) == (
            "/**\n"
            " * add description.\n"
            " * @param {any} a DESCRIPTION\n"
            " * @param {any} b DESCRIPTION\n"
            " * @returns {any} DESCRIPTION\n"
            " */"
        )

    def test_no_parameters(self):
        """Test a zero-parameter JSDoc block."""
        assert render_template("typescript", "Foo", []) == (
            "/**\n"
            " * Foo description.\n"
            " * @returns {any} DESCRIPTION\n"
            " */"
        )


class TestRenderingContract:
    """Tests for determinism and unsupported languages."""

    def test_unknown_language_renders_empty(self):
        """Test unsupported languages produce nothing to insert."""
        assert render_template("ruby", "greet", ["name"]) == ""
        assert render_template(None, "greet", ["name"]) == ""

    def test_rendering_is_deterministic(self):
        """Test the same inputs always render the same text."""
        first = render_template("python", "greet", ["name"])
        second = render_template("python", "greet", ["name"])
        assert first == second

    def test_only_newline_separators(self):
        """Test templates never contain carriage returns."""
        for language in ("python", "javascript"):
            assert "\r" not in render_template(language, "greet", ["name", "age"])

    def test_input_list_not_mutated(self):
        """Test the caller's parameter list is left alone."""
        params = ["a", "b"]
        render_template("python", "f", params)
        assert params == ["a", "b"]
