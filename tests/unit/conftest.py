"""Shared fixtures for lazytable unit tests."""

import pytest

from lazytable.config import PADDING_ENV_VAR, WIDTH_ENV_VAR
from lazytable.models import TableConfig, default_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's LAZYTABLE_* variables out of the tests."""
    monkeypatch.delenv(WIDTH_ENV_VAR, raising=False)
    monkeypatch.delenv(PADDING_ENV_VAR, raising=False)


@pytest.fixture
def config() -> TableConfig:
    """Default table config (width 80, padding 1, border |-+)."""
    return default_config()
