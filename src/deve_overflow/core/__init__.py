"""Core layer — pure helpers and data shapes.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from deve_overflow.core.formatting import (
    format_date,
    format_number,
    generate_id,
    truncate_text,
)
from deve_overflow.core.models import NavLink, User
from deve_overflow.core.timing import delay, schedule_delay

__all__: list[str] = [
    "NavLink",
    "User",
    "delay",
    "format_date",
    "format_number",
    "generate_id",
    "schedule_delay",
    "truncate_text",
]
