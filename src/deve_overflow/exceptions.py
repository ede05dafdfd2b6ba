"""Custom exception hierarchy for deve-overflow.

The formatting helpers themselves never raise library-specific errors;
malformed inputs surface as whatever the underlying operation raises.
The exceptions below cover the layers around them — user record
exchange, settings, and the CLI — and all inherit from
:class:`DeveOverflowError` so the CLI error boundary can render them.

Hierarchy
---------
DeveOverflowError
├── InvalidArgumentError
├── UserRecordError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class DeveOverflowError(Exception):
    """Base exception for all deve-overflow errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- CLI input --------------------------------------------------------------

class InvalidArgumentError(DeveOverflowError):
    """Raised when a command-line argument cannot be converted."""


# --- Data exchange ----------------------------------------------------------

class UserRecordError(DeveOverflowError):
    """Raised when user data from a collaborator has the wrong shape."""


# --- Settings ---------------------------------------------------------------

class ConfigurationError(DeveOverflowError):
    """Raised when a setting holds an unsupported value."""


# --- Environment / tooling --------------------------------------------------

class EnvironmentError(DeveOverflowError):
    """Raised when an optional runtime dependency is not available."""
