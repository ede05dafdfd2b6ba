"""CLI console helpers with optional Rich support.

Diagnostics and errors go to stderr through :data:`console`; command
results go to stdout as plain text through :func:`emit` so they stay
pipeable and free of markup interpretation.

Rich is never imported at module level, so bootstrap paths
(``--help``, ``--version``) keep working when it is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from deve_overflow.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance, targeting stderr by default."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def emit(text: str) -> None:
	"""Write a command result line to stdout verbatim."""
	print(text, file=sys.stdout)


def render_table(
	title: str,
	columns: Sequence[str],
	rows: Sequence[Sequence[str]],
) -> None:
	"""Render *rows* as a table on stdout.

	Uses a Rich table when Rich is installed, else aligned plain text.
	Cell values are shown literally, never as Rich markup.
	"""
	try:
		from rich.table import Table
		from rich.text import Text
	except ModuleNotFoundError:
		_print_plain_table(title, columns, rows)
		return

	table = Table(
		title=title,
		show_header=True,
		header_style="bold cyan",
		border_style="dim",
	)
	for column in columns:
		table.add_column(column)
	for row in rows:
		table.add_row(*(Text(cell) for cell in row))
	get_rich_console(stderr=False).print(table)


def _print_plain_table(
	title: str,
	columns: Sequence[str],
	rows: Sequence[Sequence[str]],
) -> None:
	widths = [
		max([len(column), *(len(row[i]) for row in rows)])
		for i, column in enumerate(columns)
	]
	emit(title)
	emit("  ".join(column.ljust(width) for column, width in zip(columns, widths)))
	emit("  ".join("-" * width for width in widths))
	for row in rows:
		emit("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
