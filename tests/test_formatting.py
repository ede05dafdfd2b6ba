"""Tests for the formatting helpers (core/formatting.py).

Every test is a pure function call — no I/O, no mocking.  Covered:

* Date rendering with fixed English month names
* Textual digit grouping, including the fractional-part quirk
* Truncation boundaries and unguarded negative lengths
* Identifier format (not uniqueness)
"""

from __future__ import annotations

import random
import re
from datetime import date, datetime, timedelta, timezone

import pytest

from deve_overflow.core.formatting import (
    format_date,
    format_number,
    generate_id,
    truncate_text,
)


# ---------------------------------------------------------------------------
# format_date
# ---------------------------------------------------------------------------

class TestFormatDate:
    def test_example(self) -> None:
        assert format_date(date(2024, 1, 5)) == "January 5, 2024"

    def test_day_is_not_zero_padded(self) -> None:
        assert format_date(date(2023, 9, 1)) == "September 1, 2023"

    @pytest.mark.parametrize(
        ("month", "name"),
        [(1, "January"), (6, "June"), (12, "December")],
    )
    def test_month_names(self, month: int, name: str) -> None:
        assert format_date(date(2020, month, 15)).startswith(f"{name} ")

    def test_accepts_datetime(self) -> None:
        assert format_date(datetime(2024, 2, 29, 23, 59)) == "February 29, 2024"

    def test_no_timezone_conversion(self) -> None:
        value = datetime(2024, 3, 10, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert format_date(value) == "March 10, 2024"

    def test_order_is_month_day_year(self) -> None:
        rendered = format_date(date(1999, 12, 31))
        assert re.fullmatch(r"[A-Z][a-z]+ \d{1,2}, \d{4}", rendered)


# ---------------------------------------------------------------------------
# format_number
# ---------------------------------------------------------------------------

class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (42, "42"),
            (999, "999"),
            (1000, "1,000"),
            (1234567, "1,234,567"),
            (100000, "100,000"),
        ],
    )
    def test_integers(self, value: int, expected: str) -> None:
        assert format_number(value) == expected

    def test_negative(self) -> None:
        assert format_number(-1234) == "-1,234"

    def test_no_leading_comma(self) -> None:
        assert not format_number(123456).startswith(",")

    def test_short_fraction(self) -> None:
        assert format_number(1234.5) == "1,234.5"

    def test_long_fraction_is_grouped_textually(self) -> None:
        assert format_number(1234.5678) == "1,234.5,678"

    def test_integral_float_drops_fraction(self) -> None:
        assert format_number(1000.0) == "1,000"

    def test_large_float_is_not_exponent(self) -> None:
        assert format_number(1e16) == "10,000,000,000,000,000"

    def test_exponent_form_from_1e21(self) -> None:
        assert format_number(1e21) == "1e+21"

    def test_digits_preserved(self) -> None:
        n = 9876543210
        assert format_number(n).replace(",", "") == str(n)


# ---------------------------------------------------------------------------
# truncate_text
# ---------------------------------------------------------------------------

class TestTruncateText:
    def test_equal_length_unchanged(self) -> None:
        assert truncate_text("abc", 3) == "abc"

    def test_one_over(self) -> None:
        assert truncate_text("abcd", 3) == "abc..."

    def test_shorter_unchanged(self) -> None:
        assert truncate_text("hi", 10) == "hi"

    def test_empty_string(self) -> None:
        assert truncate_text("", 0) == ""

    def test_zero_length(self) -> None:
        assert truncate_text("abc", 0) == "..."

    def test_ignores_word_boundaries(self) -> None:
        assert truncate_text("hello world", 7) == "hello w..."

    def test_negative_length_follows_slicing(self) -> None:
        assert truncate_text("abcd", -1) == "abc..."


# ---------------------------------------------------------------------------
# generate_id
# ---------------------------------------------------------------------------

_ID_PATTERN = re.compile(r"[0-9a-z]{1,7}")


class TestGenerateId:
    def test_format(self) -> None:
        for _ in range(50):
            assert _ID_PATTERN.fullmatch(generate_id())

    def test_two_calls_both_match(self) -> None:
        first, second = generate_id(), generate_id()
        assert _ID_PATTERN.fullmatch(first)
        assert _ID_PATTERN.fullmatch(second)

    def test_seeded_rng_is_reproducible(self) -> None:
        assert generate_id(random.Random(7)) == generate_id(random.Random(7))

    def test_known_fraction(self) -> None:
        class _Fixed(random.Random):
            def random(self) -> float:
                return 0.5

        # 0.5 in base 36 is exactly 0.i
        assert generate_id(_Fixed()) == "i"

    def test_zero_fraction_gives_empty_id(self) -> None:
        class _Zero(random.Random):
            def random(self) -> float:
                return 0.0

        assert generate_id(_Zero()) == ""
