"""Rendering of session output for the CLI layer.

This module is responsible for:

* Printing the command format banner before every prompt.
* Printing results between ``=`` rules.
* Printing input errors followed by the banner again.

All display-related logic lives here — no parsing, no arithmetic.
"""

from __future__ import annotations

from typing import Any

from cmdcalc.cli.console import output
from cmdcalc.core.models import CalculationResult
from cmdcalc.exceptions import InputError

RULE_WIDTH: int = 83

USAGE_LINES: tuple[str, ...] = (
    "<" + "-" * (RULE_WIDTH - 2) + ">",
    "Format of input is <command> <operand1> <operand2>",
    "Example: add 100 50",
    "<" + "-" * (RULE_WIDTH - 2) + ">",
    'Enter "Quit", to exit!',
    "<" + "-" * (RULE_WIDTH - 2) + ">",
)

RESULT_RULE: str = "=" * RULE_WIDTH

RETRY_EXHAUSTED_MESSAGE: str = "Retry attempts exhausted!"


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def build_result_line(result: CalculationResult) -> str:
    """Build ``The result of the "add" operation is: 15``."""
    return (
        f'The result of the "{result.command.keyword}" operation is: '
        f"{result.rendered}"
    )


# ---------------------------------------------------------------------------
# SessionView implementation
# ---------------------------------------------------------------------------

class ConsoleSessionView:
    """Render session events to stdout through the console proxy."""

    def __init__(self, console: Any = output) -> None:
        self._console = console

    def show_usage(self) -> None:
        for line in USAGE_LINES:
            self._console.print(line)
        self._console.print()

    def show_result(self, result: CalculationResult) -> None:
        self._console.print()
        self._console.print(RESULT_RULE)
        self._console.print(build_result_line(result), style="bold green")
        self._console.print(RESULT_RULE)
        self._console.print()

    def show_error(self, error: InputError) -> None:
        self._console.print()
        self._console.print(error.describe(), style="red")
        self.show_usage()
        self._console.print()

    def show_retry_exhausted(self) -> None:
        self._console.print()
        self._console.print(RETRY_EXHAUSTED_MESSAGE, style="bold red")
        self._console.print()
