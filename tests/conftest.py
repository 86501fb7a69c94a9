"""Shared test fixtures and configuration."""

import logging
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep local overrides from leaking into tests."""
    monkeypatch.delenv('BYTE_FORMAT_DEFAULT_VALUE', raising=False)
    monkeypatch.delenv('BYTE_FORMAT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('NO_COLOR', raising=False)


@pytest.fixture
def restore_root_logger():
    """Undo logging.basicConfig(force=True) calls made by a test."""
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
