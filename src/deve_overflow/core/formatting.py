"""Stateless formatting helpers.

Every function here is an independent transformation — no I/O and no
shared state.  Inputs are assumed well-formed; nothing is guarded, so
unusual inputs produce whatever the direct textual transformation
yields.
"""

from __future__ import annotations

import logging
import random
import re
from datetime import date

logger = logging.getLogger(__name__)

# Fixed English names so output does not depend on the process locale.
_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_GROUPING_PATTERN = re.compile(r"\B(?=(\d{3})+(?!\d))")

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_ID_LENGTH = 7

ELLIPSIS = "..."


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def format_date(value: date) -> str:
    """Render *value* as ``"January 5, 2024"``.

    Accepts ``date`` and ``datetime``.  Calendar fields are read as
    stored; no timezone conversion takes place.
    """
    return f"{_MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_EXPONENT_THRESHOLD = 1e21


def _decimal_text(number: int | float) -> str:
    """Plain decimal text of *number*.

    Integral floats below 1e21 drop the ``.0`` and never use exponent
    notation, so ``1e16`` reads ``"10000000000000000"``.
    """
    if (
        isinstance(number, float)
        and number.is_integer()
        and abs(number) < _EXPONENT_THRESHOLD
    ):
        return str(int(number))
    return repr(number)


def format_number(number: int | float) -> str:
    """Insert a comma every three digits of the decimal text of *number*.

    The grouping is textual, so a fractional part with more than three
    digits is grouped as well (``1234.5678`` becomes ``"1,234.5,678"``).
    """
    return _GROUPING_PATTERN.sub(",", _decimal_text(number))


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def truncate_text(text: str, max_length: int) -> str:
    """Cut *text* to *max_length* characters and append ``"..."``.

    Text at or below the limit is returned unchanged.  The cut ignores
    word boundaries.  A negative *max_length* follows slice semantics.
    """
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}{ELLIPSIS}"


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

def generate_id(rng: random.Random | None = None) -> str:
    """Return a short base-36 identifier for client-side keys.

    The identifier is the first seven base-36 digits of the fractional
    part of a random float.  The float comes from :mod:`random`, which
    is **not** cryptographically secure, and seven characters leave a
    real chance of collisions at scale.  Use it for transient UI keys
    only, never for persisted records or anything security-sensitive.
    An expansion that terminates early yields a shorter identifier.

    Parameters
    ----------
    rng:
        Optional :class:`random.Random` to draw from, e.g. a seeded
        instance in tests.  Defaults to the module-level generator.
    """
    fraction = (rng or random).random()
    digits: list[str] = []
    while fraction and len(digits) < _ID_LENGTH:
        fraction *= 36
        digit = int(fraction)
        digits.append(_BASE36_DIGITS[digit])
        fraction -= digit
    identifier = "".join(digits)
    logger.debug("Generated identifier %s", identifier)
    return identifier
