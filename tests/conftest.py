"""Shared fixtures for the phrase matcher test suite."""

import logging

import pytest

from signmatch.assets import DEFAULT_PHRASES
from signmatch.logging.context import clear_log_context
from signmatch.matching import MatchEngine
from signmatch.normalization import DEFAULT_VARIANT_RULES

ENV_VARS = ("LOG_LEVEL", "ENVIRONMENT", "SIGNMATCH_TTS_MANIFEST")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove matcher environment variables so tests start from defaults."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers/level replaced by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def catalog():
    """The built-in ten-phrase catalog, in priority order."""
    return tuple(entry["text"] for entry in DEFAULT_PHRASES)


@pytest.fixture
def engine(catalog):
    """MatchEngine over the built-in catalog and variant rules."""
    return MatchEngine(catalog=catalog, rules=DEFAULT_VARIANT_RULES)
