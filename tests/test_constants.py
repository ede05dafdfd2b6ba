"""Tests for application constants (utils/constants.py)."""

from __future__ import annotations

import pytest

from deve_overflow.utils import constants


class TestNavigation:
    def test_links_in_order(self) -> None:
        assert [(link.label, link.href) for link in constants.NAV_LINKS] == [
            ("Home", "/"),
            ("Questions", "/questions"),
            ("Tags", "/tags"),
            ("Community", "/community"),
            ("About", "/about"),
        ]

    def test_is_tuple(self) -> None:
        assert isinstance(constants.NAV_LINKS, tuple)


class TestScalars:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("ITEMS_PER_PAGE", 10),
            ("MAX_PAGE_DISPLAY", 5),
            ("USERNAME_MIN_LENGTH", 3),
            ("USERNAME_MAX_LENGTH", 20),
            ("PASSWORD_MIN_LENGTH", 8),
            ("DEBOUNCE_DELAY", 300),
            ("API_TIMEOUT", 10000),
        ],
    )
    def test_value(self, name: str, value: int) -> None:
        assert getattr(constants, name) == value


class TestTables:
    def test_api_endpoints(self) -> None:
        assert dict(constants.API_ENDPOINTS) == {
            "AUTH": "/api/auth",
            "USERS": "/api/users",
            "POSTS": "/api/posts",
            "COMMENTS": "/api/comments",
            "TAGS": "/api/tags",
        }

    def test_storage_keys(self) -> None:
        assert dict(constants.STORAGE_KEYS) == {
            "THEME": "deve-overflow-theme",
            "AUTH_TOKEN": "deve-overflow-token",
            "USER": "deve-overflow-user",
        }

    def test_themes(self) -> None:
        assert dict(constants.THEMES) == {
            "LIGHT": "light",
            "DARK": "dark",
            "SYSTEM": "system",
        }

    @pytest.mark.parametrize("table", ["API_ENDPOINTS", "STORAGE_KEYS", "THEMES"])
    def test_read_only(self, table: str) -> None:
        mapping = getattr(constants, table)
        with pytest.raises(TypeError):
            mapping["NEW"] = "x"
