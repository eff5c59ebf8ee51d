"""Central tool registration for MCP server."""

from mcp.server.fastmcp import FastMCP

from auto_doc_generator.features.documentation.tools import register_documentation_tools


def register_all_tools(mcp: FastMCP) -> None:
    """Register all MCP tools.

    Documentation (2 tools - generate_docstrings_for_file, preview_docstring)
    """
    register_documentation_tools(mcp)
