"""Domain models for deve-overflow.

All models are **frozen** dataclasses — immutable value objects.  The
library never creates or mutates a :class:`User` on its own; accounts
are owned by external collaborators and the record only describes the
shape of the data exchanged with them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from deve_overflow.exceptions import UserRecordError


# ---------------------------------------------------------------------------
# Navigation entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NavLink:
    """A single navigation entry."""

    href: str
    """Route path (e.g. ``/questions``)."""

    label: str
    """Text shown to the user."""


# ---------------------------------------------------------------------------
# User record
# ---------------------------------------------------------------------------

_WIRE_FIELDS: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("name", "name"),
    ("email", "email"),
    ("password", "password"),
    ("created_at", "createdAt"),
    ("updated_at", "updatedAt"),
)


def _parse_timestamp(key: str, value: object) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # ``fromisoformat`` rejects the trailing "Z" before Python 3.11.
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise UserRecordError(
                f"Invalid timestamp for {key!r}: {value!r}",
                hint="Timestamps must be ISO-8601 strings.",
            ) from exc
    raise UserRecordError(
        f"Invalid timestamp for {key!r}: expected str or datetime, "
        f"got {type(value).__name__}",
    )


@dataclass(frozen=True, slots=True)
class User:
    """An account record as exchanged with the account collaborators."""

    id: str
    """Opaque unique identifier."""

    name: str
    """Display name."""

    email: str
    """Email address."""

    password: str = field(repr=False)
    """Credential secret — hashed or encoded in practice."""

    created_at: datetime
    """Creation timestamp."""

    updated_at: datetime
    """Last-update timestamp."""

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> User:
        """Build a :class:`User` from the camelCase wire shape.

        Raises
        ------
        UserRecordError
            If a key is missing or a timestamp cannot be parsed.
        """
        missing = [wire for _, wire in _WIRE_FIELDS if wire not in data]
        if missing:
            raise UserRecordError(
                f"Missing user fields: {', '.join(missing)}",
            )

        return User(
            id=str(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            password=str(data["password"]),
            created_at=_parse_timestamp("createdAt", data["createdAt"]),
            updated_at=_parse_timestamp("updatedAt", data["updatedAt"]),
        )

    def to_dict(self) -> dict[str, str]:
        """Render the record in the camelCase wire shape."""
        result: dict[str, str] = {}
        for attr, wire in _WIRE_FIELDS:
            value = getattr(self, attr)
            result[wire] = value.isoformat() if isinstance(value, datetime) else value
        return result
