"""Shared pytest fixtures for the auto-doc-generator test suite."""

import logging
from pathlib import Path

import pytest
import structlog


# ============================================================================
# Configuration Isolation
# ============================================================================

@pytest.fixture(autouse=True, scope="session")
def silence_structlog():
    """Drop structured log output so it never mixes with CLI stdout."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Reset the global configuration around every test."""
    from auto_doc_generator.core.config import load_config

    monkeypatch.delenv("AUTO_DOC_CONFIG", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    load_config(None)
    yield
    load_config(None)


# ============================================================================
# Sample Code Fixtures
# ============================================================================

@pytest.fixture
def sample_python_code() -> str:
    """Python module with a function, a class and a method, none documented."""
    return """import os


def greet(name, age):
    return name


class Foo:
    def run(self):
        pass
"""


@pytest.fixture
def sample_javascript_code() -> str:
    """JavaScript module with a function and a class, none documented."""
    return """function add(a, b) {
  return a + b;
}

class Calculator {
  total() {
    return 0;
  }
}
"""


@pytest.fixture
def python_file(tmp_path, sample_python_code) -> Path:
    """Write the sample Python module to disk."""
    path = tmp_path / "module.py"
    path.write_text(sample_python_code)
    return path


@pytest.fixture
def javascript_file(tmp_path, sample_javascript_code) -> Path:
    """Write the sample JavaScript module to disk."""
    path = tmp_path / "app.js"
    path.write_text(sample_javascript_code)
    return path
