"""CLI application entry point for cmd-calc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cmdcalc.exceptions.CmdCalcError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~cmdcalc.core.session.CalculatorSession`.
* This module is the only place that translates between a session
  outcome and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cmdcalc.cli import exit_codes
from cmdcalc.cli.console import configure_logging, console
from cmdcalc.core.models import SessionOutcome
from cmdcalc.core.protocols import LineReader, SessionView
from cmdcalc.exceptions import CmdCalcError
from cmdcalc.version import __version__

logger = logging.getLogger(__name__)

_OUTCOME_EXIT_CODES: dict[SessionOutcome, int] = {
    SessionOutcome.QUIT: exit_codes.SUCCESS,
    SessionOutcome.END_OF_INPUT: exit_codes.SUCCESS,
    SessionOutcome.RETRY_EXHAUSTED: exit_codes.RETRY_EXHAUSTED,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The calculator takes no positional arguments; commands are entered
    interactively once the session starts.
    """
    parser = argparse.ArgumentParser(
        prog="cmd-calc",
        description=(
            "Interactive calculator. Enter lines such as 'add 100 50'; "
            "supported commands are add, subtract, multiply, divide and quit."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and session events to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _run_session(reader: LineReader | None, view: SessionView | None) -> int:
    """Build the session from CLI adapters and map its outcome to an exit code."""
    from cmdcalc.cli.prompt import make_line_reader
    from cmdcalc.cli.view import ConsoleSessionView
    from cmdcalc.core.session import CalculatorSession

    session = CalculatorSession(
        reader if reader is not None else make_line_reader(),
        view if view is not None else ConsoleSessionView(),
    )
    outcome = session.run()
    logger.debug("Session ended: %s", outcome.name)
    return _OUTCOME_EXIT_CODES[outcome]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    reader: LineReader | None = None,
    view: SessionView | None = None,
) -> int:
    """Run the cmd-calc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    reader, view:
        Optional adapters replacing stdin and the console view.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return _run_session(reader, view)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CmdCalcError as exc:
        console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
