"""MCP server entry point."""

from mcp.server.fastmcp import FastMCP

from auto_doc_generator.core.config import parse_args_and_get_config
from auto_doc_generator.core.sentry import init_sentry
from auto_doc_generator.server.registry import register_all_tools

mcp = FastMCP("auto-doc-generator")


def run_mcp_server() -> None:
    """Run the MCP server.

    This function:
    1. Parses command-line arguments and loads configuration
    2. Initializes Sentry error tracking (if configured)
    3. Registers all MCP tools
    4. Starts the MCP server with stdio transport
    """
    parse_args_and_get_config()
    init_sentry()
    register_all_tools(mcp)
    mcp.run(transport="stdio")
