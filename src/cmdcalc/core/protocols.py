"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the CLI adapters must satisfy.  The
session loop depends ONLY on these protocols — never on a concrete
console or input source — so it can be driven by scripted input in
tests.
"""

from __future__ import annotations

from typing import Protocol

from cmdcalc.core.models import CalculationResult
from cmdcalc.exceptions import InputError


class LineReader(Protocol):
    """Contract for sources of user input lines.

    Any object that implements :meth:`read_line` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read_line(self, prompt: str) -> str | None:
        """Show *prompt* and block until one line is available.

        Returns the line without its trailing line terminator, or
        ``None`` once input is exhausted.

        Raises
        ------
        KeyboardInterrupt
            If the user aborts the prompt.
        """
        ...  # pragma: no cover


class SessionView(Protocol):
    """Contract for rendering session output."""

    def show_usage(self) -> None:
        """Render the command format banner."""
        ...  # pragma: no cover

    def show_result(self, result: CalculationResult) -> None:
        """Render a successful calculation."""
        ...  # pragma: no cover

    def show_error(self, error: InputError) -> None:
        """Render a recoverable input error followed by the usage banner."""
        ...  # pragma: no cover

    def show_retry_exhausted(self) -> None:
        """Render the final message when the retry budget runs out."""
        ...  # pragma: no cover
