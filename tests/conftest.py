"""Pytest configuration and fixtures for Calclock tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calclock can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calclock.format.registry import default_registry  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_default_formatters():
    """Give every test the built-in formatters in the process registry."""
    default_registry().reset()
    yield
    default_registry().reset()
