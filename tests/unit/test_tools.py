"""Tests for the MCP documentation tools."""

import pytest

from auto_doc_generator.core.exceptions import NoActiveFileError, UnsupportedLanguageError
from auto_doc_generator.features.documentation.tools import (
    generate_docstrings_for_file_tool,
    preview_docstring_tool,
)


class TestToolRegistration:
    """Tests for register_documentation_tools."""

    def test_tools_registered(self, mock_mcp):
        """Test both documentation tools are registered by name."""
        assert set(mock_mcp.tools) == {"generate_docstrings_for_file", "preview_docstring"}

    def test_registered_tool_runs(self, mock_mcp, python_file):
        """Test the registered wrapper delegates to the implementation."""
        tool = mock_mcp.tools["generate_docstrings_for_file"]
        result = tool(file_path=str(python_file), language=None, dry_run=True, backup=False)
        assert result["summary"]["planned"] == 3


class TestGenerateDocstringsForFileTool:
    """Tests for generate_docstrings_for_file_tool."""

    def test_response_shape(self, python_file):
        """Test the response summarizes the pass."""
        result = generate_docstrings_for_file_tool(file_path=str(python_file))

        assert result["message"] == "Docstrings inserted for all functions/classes in file!"
        assert result["summary"] == {
            "language": "python",
            "declarations_found": 3,
            "already_documented": 0,
            "planned": 3,
            "inserted": 3,
            "failed": 0,
            "dry_run": False,
        }
        assert [i["name"] for i in result["insertions"]] == ["greet", "Foo", "run"]
        assert [i["line_number"] for i in result["insertions"]] == [4, 8, 9]
        assert result["insertions"][1]["kind"] == "class"
        assert result["failures"] == []
        assert result["file_modified"] is True

    def test_dry_run(self, javascript_file, sample_javascript_code):
        """Test dry runs return templates without writing."""
        result = generate_docstrings_for_file_tool(file_path=str(javascript_file), dry_run=True)

        assert result["file_modified"] is False
        assert result["insertions"][0]["template"].startswith("/**\n * add description.")
        assert javascript_file.read_text() == sample_javascript_code

    def test_errors_propagate(self, tmp_path):
        """Test precondition failures are raised to the caller."""
        with pytest.raises(NoActiveFileError):
            generate_docstrings_for_file_tool(file_path=str(tmp_path / "missing.py"))


class TestPreviewDocstringTool:
    """Tests for preview_docstring_tool."""

    def test_function_line(self):
        """Test a function line returns its declaration and template."""
        result = preview_docstring_tool("def greet(name, age):", "python")
        assert result["declaration"] == {"kind": "function", "name": "greet", "parameters": ["name", "age"]}
        assert result["template"].startswith('"""greet description.')

    def test_non_declaration(self):
        """Test ordinary lines return no template."""
        assert preview_docstring_tool("x = 1", "python") == {"declaration": None, "template": ""}

    def test_unsupported_language(self):
        """Test unsupported languages are rejected."""
        with pytest.raises(UnsupportedLanguageError):
            preview_docstring_tool("def greet(name):", "ruby")
