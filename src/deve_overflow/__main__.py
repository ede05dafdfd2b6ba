"""Allow ``python -m deve_overflow`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m deve_overflow`` behaves identically to the ``deve-overflow``
console script.
"""

from __future__ import annotations

from deve_overflow.cli.app import cli

if __name__ == "__main__":
    cli()
