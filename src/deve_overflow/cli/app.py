"""CLI application entry point and command routing for deve-overflow.

This module is the **sole error boundary** for the entire application.
It catches :class:`~deve_overflow.exceptions.DeveOverflowError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No formatting logic lives here — every command delegates to
  :mod:`deve_overflow.core`.
* Argument conversion errors are raised as
  :class:`~deve_overflow.exceptions.InvalidArgumentError`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import math
import sys
import time
from datetime import date, datetime

from deve_overflow.cli import exit_codes
from deve_overflow.cli.console import console, emit, render_table
from deve_overflow.config import Settings, load_settings, validate_log_level
from deve_overflow.core.formatting import (
    format_date,
    format_number,
    generate_id,
    truncate_text,
)
from deve_overflow.core.timing import delay
from deve_overflow.exceptions import DeveOverflowError, InvalidArgumentError
from deve_overflow.logger import setup_logging
from deve_overflow.utils import constants
from deve_overflow.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="deve-overflow",
        description="Formatting helpers and constants for deve-overflow.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the log level (default: $DEVE_OVERFLOW_LOG_LEVEL or WARNING).",
    )

    sub = parser.add_subparsers(dest="command")

    p_date = sub.add_parser("format-date", help="Render an ISO date as 'January 5, 2024'.")
    p_date.add_argument("value", help="ISO-8601 date or datetime.")

    p_number = sub.add_parser("format-number", help="Group digits with commas.")
    p_number.add_argument("value", help="Integer or decimal number.")

    p_truncate = sub.add_parser("truncate", help="Cut text to a maximum length.")
    p_truncate.add_argument("text")
    p_truncate.add_argument("max_length", help="Maximum number of characters.")

    p_id = sub.add_parser("generate-id", help="Print random base-36 identifiers.")
    p_id.add_argument("-n", "--count", type=int, default=1, help="How many to print.")

    sub.add_parser("constants", help="Show the application constants.")

    p_wait = sub.add_parser("wait", help="Sleep for a number of milliseconds.")
    p_wait.add_argument("milliseconds", help="Delay in milliseconds.")

    return parser


# ---------------------------------------------------------------------------
# Argument conversion
# ---------------------------------------------------------------------------

def _parse_date(raw: str) -> date:
    try:
        if "T" in raw or " " in raw:
            return datetime.fromisoformat(raw.replace("Z", "+00:00"))
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Not an ISO-8601 date: {raw!r}",
            hint="Use a value such as 2024-01-05 or 2024-01-05T10:30:00.",
        ) from exc


def _parse_number(raw: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"Not a number: {raw!r}") from exc


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from exc


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_format_date(args: argparse.Namespace) -> int:
    emit(format_date(_parse_date(args.value)))
    return exit_codes.SUCCESS


def _handle_format_number(args: argparse.Namespace) -> int:
    emit(format_number(_parse_number(args.value)))
    return exit_codes.SUCCESS


def _handle_truncate(args: argparse.Namespace) -> int:
    emit(truncate_text(args.text, _parse_int(args.max_length, "max_length")))
    return exit_codes.SUCCESS


def _handle_generate_id(args: argparse.Namespace) -> int:
    if args.count < 1:
        raise InvalidArgumentError(f"--count must be at least 1, got {args.count}")
    for _ in range(args.count):
        emit(generate_id())
    return exit_codes.SUCCESS


def _handle_wait(args: argparse.Namespace) -> int:
    milliseconds = _parse_number(args.milliseconds)
    if not math.isfinite(milliseconds):
        raise InvalidArgumentError(
            f"milliseconds must be a finite number, got {args.milliseconds!r}",
        )
    started = time.monotonic()
    asyncio.run(delay(milliseconds))
    elapsed = (time.monotonic() - started) * 1000
    emit(f"waited {elapsed:.0f} ms")
    return exit_codes.SUCCESS


def _handle_constants(settings: Settings) -> int:
    """Render every constant table, marking the configured theme."""
    render_table(
        "Navigation",
        ("Label", "Path"),
        [(link.label, link.href) for link in constants.NAV_LINKS],
    )
    render_table(
        "Limits",
        ("Name", "Value"),
        [
            ("ITEMS_PER_PAGE", str(constants.ITEMS_PER_PAGE)),
            ("MAX_PAGE_DISPLAY", str(constants.MAX_PAGE_DISPLAY)),
            ("USERNAME_MIN_LENGTH", str(constants.USERNAME_MIN_LENGTH)),
            ("USERNAME_MAX_LENGTH", str(constants.USERNAME_MAX_LENGTH)),
            ("PASSWORD_MIN_LENGTH", str(constants.PASSWORD_MIN_LENGTH)),
            ("DEBOUNCE_DELAY", f"{constants.DEBOUNCE_DELAY} ms"),
            ("API_TIMEOUT", f"{constants.API_TIMEOUT} ms"),
        ],
    )
    render_table("API endpoints", ("Name", "Path"), list(constants.API_ENDPOINTS.items()))
    render_table("Storage keys", ("Name", "Key"), list(constants.STORAGE_KEYS.items()))
    render_table(
        "Themes",
        ("Name", "Value", "Active"),
        [
            (name, value, "*" if value == settings.theme else "")
            for name, value in constants.THEMES.items()
        ],
    )
    return exit_codes.SUCCESS


_HANDLERS = {
    "format-date": _handle_format_date,
    "format-number": _handle_format_number,
    "truncate": _handle_truncate,
    "generate-id": _handle_generate_id,
    "wait": _handle_wait,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Parse *argv*, load settings, configure logging and run one command.

    Parameters
    ----------
    argv:
        Arguments without the program name; ``None`` reads
        ``sys.argv[1:]``.

    Returns
    -------
    int
        One of the :mod:`~deve_overflow.cli.exit_codes` values.

    Raises
    ------
    DeveOverflowError
        Left for :func:`cli` to render.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings()
    level = validate_log_level(args.log_level) if args.log_level else settings.log_level
    setup_logging(level)
    logger.debug("Dispatching command %s", args.command)

    if args.command == "constants":
        return _handle_constants(settings)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point; maps every outcome to an exit code.

    Known errors are printed with their hint, never as a traceback.
    """
    try:
        code = main()
        sys.exit(code)
    except DeveOverflowError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
