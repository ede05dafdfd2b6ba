"""Application-wide constants.

Values are reproduced verbatim for the presentation and data-access
layers.  Everything here is created once at import time and is
read-only: sequences are tuples and keyed tables are
:class:`~types.MappingProxyType` views.  Nothing in this module
validates or enforces the values.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from deve_overflow.core.models import NavLink


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(href="/", label="Home"),
    NavLink(href="/questions", label="Questions"),
    NavLink(href="/tags", label="Tags"),
    NavLink(href="/community", label="Community"),
    NavLink(href="/about", label="About"),
)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

ITEMS_PER_PAGE: int = 10
MAX_PAGE_DISPLAY: int = 5


# ---------------------------------------------------------------------------
# Form validation
# ---------------------------------------------------------------------------

USERNAME_MIN_LENGTH: int = 3
USERNAME_MAX_LENGTH: int = 20
PASSWORD_MIN_LENGTH: int = 8


# ---------------------------------------------------------------------------
# API routes (path prefixes only)
# ---------------------------------------------------------------------------

API_ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "AUTH": "/api/auth",
        "USERS": "/api/users",
        "POSTS": "/api/posts",
        "COMMENTS": "/api/comments",
        "TAGS": "/api/tags",
    }
)


# ---------------------------------------------------------------------------
# Timeouts
# ---------------------------------------------------------------------------

DEBOUNCE_DELAY: int = 300
"""Input debounce interval in milliseconds."""

API_TIMEOUT: int = 10000
"""Request timeout in milliseconds."""


# ---------------------------------------------------------------------------
# Local storage keys
# ---------------------------------------------------------------------------

STORAGE_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "THEME": "deve-overflow-theme",
        "AUTH_TOKEN": "deve-overflow-token",
        "USER": "deve-overflow-user",
    }
)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

THEMES: Mapping[str, str] = MappingProxyType(
    {
        "LIGHT": "light",
        "DARK": "dark",
        "SYSTEM": "system",
    }
)
