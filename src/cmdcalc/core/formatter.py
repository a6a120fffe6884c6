"""Result formatting.

The integer/floating decision is made from the operands' *text*, not
from the value: ``divide 10 4`` renders ``2`` while ``divide 10 4.0``
renders ``2.500000``.
"""

from __future__ import annotations

import math

FLOAT_DECIMALS: int = 6


def is_floating_point_literal(token: str) -> bool:
    """Return ``True`` if *token* contains a decimal point."""
    return "." in token


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def format_result(operand1: str, operand2: str, value: float) -> str:
    """Render *value* in floating mode or truncated-integer mode.

    Floating mode applies when either operand contains ``.`` and yields
    six decimals (``7.000000``).  Otherwise the value is truncated toward
    zero.  Infinities and NaN render as ``inf``, ``-inf`` and ``nan`` in
    both modes.
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    if is_floating_point_literal(operand1) or is_floating_point_literal(operand2):
        return f"{value:.{FLOAT_DECIMALS}f}"
    return str(int(value))
