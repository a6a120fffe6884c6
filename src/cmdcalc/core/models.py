"""Domain models for cmd-calc.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.

A parsed line is a :data:`Command`, which is either a
:class:`QuitCommand` or an :class:`ArithmeticCommand`.  There is no way
to build an arithmetic command without both operands.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from cmdcalc.exceptions import RetryExhaustedError


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class Operation(enum.Enum):
    """The closed set of arithmetic operations."""

    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    @property
    def symbol(self) -> str:
        """Infix operator used in debug output (``+``, ``-``, ``*``, ``/``)."""
        return _SYMBOLS[self]


_SYMBOLS: dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}

QUIT_KEYWORD: str = "QUIT"

VALID_COMMANDS: frozenset[str] = frozenset(
    {op.value for op in Operation} | {QUIT_KEYWORD}
)
"""Recognised keywords, upper-cased.  Matching is case-insensitive."""


# ---------------------------------------------------------------------------
# Parsed commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class QuitCommand:
    """Request to end the session."""

    keyword: str
    """The keyword exactly as typed (e.g. ``Quit``)."""


@dataclass(frozen=True, slots=True)
class ArithmeticCommand:
    """A validated ``<command> <operand1> <operand2>`` line."""

    keyword: str
    """The keyword exactly as typed; echoed back in the result line."""

    operation: Operation

    operand1: str
    """First operand, verbatim.  Kept as text for result formatting."""

    operand2: str
    """Second operand, verbatim."""

    @property
    def first(self) -> float:
        return float(self.operand1)

    @property
    def second(self) -> float:
        return float(self.operand2)


Command = Union[QuitCommand, ArithmeticCommand]


# ---------------------------------------------------------------------------
# Results and outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Outcome of evaluating one :class:`ArithmeticCommand`."""

    command: ArithmeticCommand
    value: float
    rendered: str
    """``value`` formatted for display (integer or six-decimal form)."""


class SessionOutcome(enum.Enum):
    """How an interactive session ended."""

    QUIT = "quit"
    RETRY_EXHAUSTED = "retry_exhausted"
    END_OF_INPUT = "end_of_input"

    def raise_for_outcome(self) -> None:
        """Raise :class:`RetryExhaustedError` if the retry budget ran out."""
        if self is SessionOutcome.RETRY_EXHAUSTED:
            raise RetryExhaustedError(
                "Retry attempts exhausted!",
                hint='Use the form "add 100 50", or type "quit" to exit.',
            )
