"""Core / service layer — pure calculator logic and the session loop.

Rules
-----
* No ``print()`` calls.
* No terminal or filesystem I/O; input and output go through protocols.
* No imports from ``cli``.
"""

from cmdcalc.core.models import (
    ArithmeticCommand,
    CalculationResult,
    Command,
    Operation,
    QuitCommand,
    SessionOutcome,
)
from cmdcalc.core.protocols import LineReader, SessionView
from cmdcalc.core.session import CalculatorSession

__all__: list[str] = [
    "ArithmeticCommand",
    "CalculationResult",
    "CalculatorSession",
    "Command",
    "LineReader",
    "Operation",
    "QuitCommand",
    "SessionOutcome",
    "SessionView",
]
