"""Shared pytest fixtures and configuration for the deve-overflow test suite.

Guidelines
----------
* No network access in any test.
* Tests must not depend on OS state; settings variables are cleared.
* Async helpers are tested with ``pytest.mark.asyncio``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from deve_overflow.config import LOG_LEVEL_VAR, THEME_VAR


@pytest.fixture(autouse=True)
def _clean_settings_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    """Isolate every test from ambient settings and stray ``.env`` files."""
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    monkeypatch.delenv(THEME_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
