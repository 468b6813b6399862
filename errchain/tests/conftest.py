"""Pytest configuration for the errchain test suite.

Keeps configuration isolated per test: the external config file cache is
cleared and errchain environment variables are removed before each test.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from errchain.config import reset_config_cache
from errchain.config.defaults import (
    ENV_CONFIG_FILE,
    ENV_EXPOSE_CAUSE,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from built-in defaults."""

    for name in (ENV_CONFIG_FILE, ENV_EXPOSE_CAUSE, ENV_LOG_JSON, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
