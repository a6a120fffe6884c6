"""Custom exception hierarchy for cmd-calc.

All exceptions that cross layer boundaries must inherit from
:class:`CmdCalcError`.  Input errors are recovered locally by the
session loop; anything else that escapes reaches the CLI error boundary.

Hierarchy
---------
CmdCalcError
├── InputError
│   ├── InvalidInputError
│   │   └── MissingOperandError
│   └── ExtraneousInputError
├── RetryExhaustedError
└── EnvironmentError
"""

from __future__ import annotations


class CmdCalcError(Exception):
    """Base exception for all cmd-calc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input parsing ---------------------------------------------------------

class InputError(CmdCalcError):
    """Raised when a line of user input cannot be turned into a command.

    Subclasses set :attr:`category`, the fixed message prefix shown to
    the user in front of the offending token.
    """

    category: str = "Invalid input "

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        self.token: str = token
        """The token that caused the parse to be abandoned."""
        super().__init__(self.describe(), hint=hint)

    def describe(self) -> str:
        """Render the one-line diagnostic, e.g. ``Extraneous input 4 received!``."""
        if self.token == "":
            return self.category.rstrip()
        return f"{self.category}{self.token} received!"


class InvalidInputError(InputError):
    """Raised for an unknown keyword or a malformed numeric operand."""

    category = "Invalid/Unrecognised input "


class MissingOperandError(InvalidInputError):
    """Raised when an arithmetic keyword is not followed by two operands."""

    category = "Missing operand(s) for "

    def describe(self) -> str:
        return f'{self.category}"{self.token}"!'


class ExtraneousInputError(InputError):
    """Raised when a line carries more than three tokens."""

    category = "Extraneous input "


# --- Session ---------------------------------------------------------------

class RetryExhaustedError(CmdCalcError):
    """Raised when consecutive invalid inputs use up the retry budget."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CmdCalcError):
    """Raised when a required runtime dependency is not available."""
