"""Shared pytest fixtures for unit tests.

Provides a MockFastMCP that records tool functions by name so the MCP
tools can be called directly.
"""

from typing import Any, Dict

import pytest


class MockFastMCP:
    """Mock FastMCP class for testing."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.tools: Dict[str, Any] = {}

    def tool(self, **kwargs: Any) -> Any:
        def decorator(func: Any) -> Any:
            self.tools[func.__name__] = func
            return func
        return decorator

    def run(self, **kwargs: Any) -> None:
        pass


@pytest.fixture
def mock_mcp() -> MockFastMCP:
    """Provide a MockFastMCP with the documentation tools registered."""
    from auto_doc_generator.features.documentation.tools import register_documentation_tools

    mcp = MockFastMCP("auto-doc-generator")
    register_documentation_tools(mcp)
    return mcp


@pytest.fixture
def no_log_config(monkeypatch):
    """Keep entry points from reconfiguring structlog during a test."""
    monkeypatch.setattr("auto_doc_generator.core.config.configure_logging", lambda **kwargs: None)
