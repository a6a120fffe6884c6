"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from cmdcalc.exceptions import EnvironmentError

LOG_FORMAT: str = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	User-supplied text is never parsed as Rich markup; styling is applied
	through *style* only, and dropped on the plain fallback.
	"""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(
		self,
		*objects: object,
		style: str | None = None,
		end: str = "\n",
	) -> None:
		"""Render with Rich when available, else plain ``print``."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			print(*objects, end=end, file=stream, flush=True)
			return
		rich_console.print(
			*objects,
			style=style,
			markup=False,
			emoji=False,
			soft_wrap=True,
			end=end,
		)


console = _ConsoleProxy(stderr=True)
"""Diagnostics from the error boundary."""

output = _ConsoleProxy(stderr=False)
"""Session output: banners, results and input errors."""


def configure_logging(verbose: bool) -> None:
	"""Send DEBUG logs to stderr when *verbose*, via Rich if installed."""
	if not verbose:
		return
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_path=False,
			markup=False,
		)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
	logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
