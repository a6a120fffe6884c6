"""Line input for the interactive session.

Two :class:`~cmdcalc.core.protocols.LineReader` implementations:

* :class:`QuestionaryLineReader` — a questionary text prompt, used when
  stdin is a terminal.
* :class:`StreamLineReader` — plain line reads from a text stream, used
  for piped or scripted sessions where no terminal is attached.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cmdcalc.cli.console import output
from cmdcalc.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pipe commands on stdin to skip the interactive prompt.",
        ) from exc
    return questionary


def _strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``; keep everything else."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class StreamLineReader:
    """Read lines from *stream* (``sys.stdin`` by default)."""

    def __init__(self, stream: TextIO | None = None, console: Any = output) -> None:
        self._stream = stream
        self._console = console

    def read_line(self, prompt: str) -> str | None:
        self._console.print(prompt, end="")
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            # Terminate the dangling prompt before the session ends.
            self._console.print()
            return None
        return _strip_line_terminator(line)


class QuestionaryLineReader:
    """Prompt with ``questionary.text``; Ctrl+C propagates as ``KeyboardInterrupt``."""

    def __init__(self) -> None:
        self._questionary = _import_questionary()

    def read_line(self, prompt: str) -> str | None:
        try:
            answer: str = self._questionary.text(prompt.rstrip()).unsafe_ask()
        except EOFError:
            return None
        return answer


def make_line_reader(stream: TextIO | None = None) -> StreamLineReader | QuestionaryLineReader:
    """Pick the reader for the current stdin.

    A questionary prompt is used only for an interactive terminal;
    everything else is read line by line.
    """
    source = stream if stream is not None else sys.stdin
    if source.isatty():
        return QuestionaryLineReader()
    return StreamLineReader(stream)
