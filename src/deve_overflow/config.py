"""Runtime settings read from the environment.

Settings come from ``DEVE_OVERFLOW_*`` environment variables, with a
``.env`` file loaded through python-dotenv when reading the process
environment.  Real environment variables always win over ``.env``
entries.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from deve_overflow.exceptions import ConfigurationError
from deve_overflow.utils.constants import THEMES

logger = logging.getLogger(__name__)

ENV_PREFIX = "DEVE_OVERFLOW_"
LOG_LEVEL_VAR = f"{ENV_PREFIX}LOG_LEVEL"
THEME_VAR = f"{ENV_PREFIX}THEME"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Standard :mod:`logging` level name, upper-case."""

    theme: str = THEMES["SYSTEM"]
    """One of the :data:`~deve_overflow.utils.constants.THEMES` values."""


def validate_log_level(value: str) -> str:
    """Normalise *value* to an upper-case level name or raise."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {value!r}",
            hint=f"Use one of: {', '.join(LOG_LEVELS)}.",
        )
    return level


def validate_theme(value: str) -> str:
    """Normalise *value* to a known theme identifier or raise."""
    theme = value.strip().lower()
    if theme not in THEMES.values():
        raise ConfigurationError(
            f"Unknown theme: {value!r}",
            hint=f"Use one of: {', '.join(THEMES.values())}.",
        )
    return theme


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv_path: str | Path | None = None,
) -> Settings:
    """Build :class:`Settings` from *environ*.

    Parameters
    ----------
    environ:
        Mapping to read from.  When ``None`` (default), ``.env`` is
        loaded into the process environment first and ``os.environ`` is
        used.  Passing a mapping enables deterministic testing.
    dotenv_path:
        Explicit ``.env`` location.  Ignored when *environ* is given.

    Raises
    ------
    ConfigurationError
        If a variable holds an unsupported value.
    """
    if environ is None:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
        environ = os.environ

    settings = Settings(
        log_level=validate_log_level(environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)),
        theme=validate_theme(environ.get(THEME_VAR, THEMES["SYSTEM"])),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
