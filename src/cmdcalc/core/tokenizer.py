"""Tokenizing and positional validation of a raw input line.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Pipeline order (enforced by :func:`parse_command`):

1. **Split** — break the line on the single space character.
2. **Count** — reject lines with more than three tokens.
3. **Validate** — keyword at position 0, numeric literals at 1 and 2.
4. **Build** — assemble a :class:`QuitCommand` or :class:`ArithmeticCommand`.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Sequence

from cmdcalc.core.models import (
    QUIT_KEYWORD,
    VALID_COMMANDS,
    ArithmeticCommand,
    Command,
    Operation,
    QuitCommand,
)
from cmdcalc.exceptions import (
    ExtraneousInputError,
    InvalidInputError,
    MissingOperandError,
)

logger = logging.getLogger(__name__)

MAX_TOKENS: int = 3
"""Keyword plus two operands."""

TOKEN_SEPARATOR: str = " "

_DIGITS: frozenset[str] = frozenset(string.digits)


# ---------------------------------------------------------------------------
# 1. Split
# ---------------------------------------------------------------------------

def split_tokens(line: str) -> list[str]:
    """Split *line* on every single space, keeping empty tokens.

    ``"add  1 2"`` yields ``["add", "", "1", "2"]``; leading and trailing
    spaces are not trimmed.
    """
    return line.split(TOKEN_SEPARATOR)


# ---------------------------------------------------------------------------
# 3. Validate
# ---------------------------------------------------------------------------

def is_valid_command(token: str) -> bool:
    """Return ``True`` if *token* is a recognised keyword, ignoring case."""
    return token.upper() in VALID_COMMANDS


def is_valid_number(token: str) -> bool:
    """Return ``True`` for a non-negative decimal literal.

    Accepted characters are ASCII digits and at most one ``.``; at least
    one digit is required.  Signs, exponents and separators are rejected.
    """
    if token.count(".") > 1:
        return False
    digits = token.replace(".", "")
    return bool(digits) and all(ch in _DIGITS for ch in digits)


def validate_token(token: str, position: int) -> str:
    """Return *token* unchanged if valid for *position*, else raise.

    Raises
    ------
    InvalidInputError
        When the token is not acceptable at its position.
    """
    valid = is_valid_command(token) if position == 0 else is_valid_number(token)
    if not valid:
        logger.debug("Rejected token %r at position %d", token, position)
        raise InvalidInputError(token)
    return token


def validate_tokens(tokens: Sequence[str]) -> list[str]:
    """Validate every token positionally, stopping at the first failure.

    Raises
    ------
    ExtraneousInputError
        When more than :data:`MAX_TOKENS` tokens are supplied.  Checked
        before any token content is inspected.
    InvalidInputError
        For the first token that fails positional validation.
    """
    if len(tokens) > MAX_TOKENS:
        logger.debug("Rejected line with %d tokens", len(tokens))
        raise ExtraneousInputError(tokens[MAX_TOKENS])
    return [validate_token(token, position) for position, token in enumerate(tokens)]


# ---------------------------------------------------------------------------
# 4. Build
# ---------------------------------------------------------------------------

def resolve_operation(keyword: str) -> Operation:
    """Map a validated, non-quit keyword to its :class:`Operation`.

    Raises
    ------
    InvalidInputError
        When *keyword* is not one of the arithmetic keywords.
    """
    try:
        return Operation(keyword.upper())
    except ValueError:
        raise InvalidInputError(keyword) from None


def parse_command(line: str) -> Command:
    """Run the full split → count → validate → build pipeline on *line*.

    Returns
    -------
    Command
        :class:`QuitCommand` for ``quit`` in any case (trailing operands,
        if valid, are ignored), otherwise an :class:`ArithmeticCommand`.

    Raises
    ------
    ExtraneousInputError
        More than three tokens.
    InvalidInputError
        Unknown keyword or malformed operand.
    MissingOperandError
        Arithmetic keyword with fewer than two operands.
    """
    tokens = validate_tokens(split_tokens(line))
    keyword = tokens[0]

    if keyword.upper() == QUIT_KEYWORD:
        return QuitCommand(keyword=keyword)

    operation = resolve_operation(keyword)
    if len(tokens) < MAX_TOKENS:
        raise MissingOperandError(keyword)

    return ArithmeticCommand(
        keyword=keyword,
        operation=operation,
        operand1=tokens[1],
        operand2=tokens[2],
    )
