"""Arithmetic engine and operation dispatch.

The four primitives are pure functions over ``float``.  Division keeps
IEEE-754 semantics on a zero divisor: ``±inf`` for a non-zero dividend
and ``nan`` for ``0 / 0``.  Python would otherwise raise
``ZeroDivisionError``.
"""

from __future__ import annotations

import logging
import math

from cmdcalc.core.formatter import format_result
from cmdcalc.core.models import ArithmeticCommand, CalculationResult, Operation

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def add(first: float, second: float) -> float:
    return first + second


def subtract(first: float, second: float) -> float:
    return first - second


def multiply(first: float, second: float) -> float:
    return first * second


def divide(first: float, second: float) -> float:
    """Divide *first* by *second*, yielding ``inf``/``nan`` on a zero divisor."""
    if second == 0.0:
        if first == 0.0 or math.isnan(first):
            return math.nan
        return math.copysign(math.inf, first) * math.copysign(1.0, second)
    return first / second


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def perform_operation(operation: Operation, first: float, second: float) -> float:
    """Apply *operation* to the operands.

    The match is exhaustive over :class:`Operation`; an unhandled member
    is an internal error, never a silent fallback.
    """
    if operation is Operation.ADD:
        return add(first, second)
    if operation is Operation.SUBTRACT:
        return subtract(first, second)
    if operation is Operation.MULTIPLY:
        return multiply(first, second)
    if operation is Operation.DIVIDE:
        return divide(first, second)
    raise AssertionError(f"Unhandled operation: {operation!r}")


def evaluate(command: ArithmeticCommand) -> CalculationResult:
    """Compute and format the result of a validated command."""
    value = perform_operation(command.operation, command.first, command.second)
    logger.debug(
        "%s %s %s = %r",
        command.operand1,
        command.operation.symbol,
        command.operand2,
        value,
    )
    return CalculationResult(
        command=command,
        value=value,
        rendered=format_result(command.operand1, command.operand2, value),
    )
