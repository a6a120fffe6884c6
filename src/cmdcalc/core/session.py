"""Interactive calculator session — the prompt/parse/evaluate loop.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~cmdcalc.core.protocols.LineReader` and a
:class:`~cmdcalc.core.protocols.SessionView` injected at construction
time, keeping the core free of any terminal I/O.

State machine
-------------
::

    PROMPTING ──line──▶ PROCESSING ──valid──▶ PROMPTING
        │                   │ ──invalid, retries left──▶ PROMPTING
        │ EOF               │ ──invalid, budget spent──▶ RETRY_EXHAUSTED
        ▼                   │ ──quit──▶ TERMINATED
    TERMINATED ◀────────────┘
"""

from __future__ import annotations

import enum
import logging

from cmdcalc.core.arithmetic import evaluate
from cmdcalc.core.models import QuitCommand, SessionOutcome
from cmdcalc.core.protocols import LineReader, SessionView
from cmdcalc.core.tokenizer import parse_command
from cmdcalc.exceptions import InputError

logger = logging.getLogger(__name__)

MAX_RETRIES: int = 3
"""Consecutive invalid inputs tolerated before the session ends."""

PROMPT: str = "Enter the command : "


class SessionState(enum.Enum):
    PROMPTING = "prompting"
    PROCESSING = "processing"
    RETRY_EXHAUSTED = "retry_exhausted"
    TERMINATED = "terminated"


class CalculatorSession:
    """Drive one interactive session until quit, EOF, or retry exhaustion.

    Parameters
    ----------
    reader:
        Source of input lines.
    view:
        Renderer for banners, results and errors.
    max_retries:
        Number of consecutive invalid lines that ends the session.
    """

    def __init__(
        self,
        reader: LineReader,
        view: SessionView,
        *,
        max_retries: int = MAX_RETRIES,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self._reader = reader
        self._view = view
        self._max_retries = max_retries
        self.retry_count: int = 0
        self.state: SessionState = SessionState.PROMPTING

    def _transition(self, state: SessionState) -> None:
        logger.debug("Session %s -> %s", self.state.name, state.name)
        self.state = state

    def process_line(self, line: str) -> SessionOutcome | None:
        """Handle one input line and return an outcome if the session ends."""
        self._transition(SessionState.PROCESSING)
        try:
            command = parse_command(line)
        except InputError as exc:
            self._view.show_error(exc)
            self.retry_count += 1
            logger.debug("Retry %d of %d", self.retry_count, self._max_retries)
            if self.retry_count >= self._max_retries:
                self._transition(SessionState.RETRY_EXHAUSTED)
                self._view.show_retry_exhausted()
                self._transition(SessionState.TERMINATED)
                return SessionOutcome.RETRY_EXHAUSTED
            self._transition(SessionState.PROMPTING)
            return None

        if isinstance(command, QuitCommand):
            self._transition(SessionState.TERMINATED)
            return SessionOutcome.QUIT

        self._view.show_result(evaluate(command))
        self.retry_count = 0
        self._transition(SessionState.PROMPTING)
        return None

    def run(self) -> SessionOutcome:
        """Loop until the session terminates and report how it ended."""
        while True:
            self._view.show_usage()
            line = self._reader.read_line(PROMPT)
            if line is None:
                self._transition(SessionState.TERMINATED)
                return SessionOutcome.END_OF_INPUT
            outcome = self.process_line(line)
            if outcome is not None:
                return outcome
