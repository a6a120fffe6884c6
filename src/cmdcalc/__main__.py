"""Allow ``python -m cmdcalc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cmdcalc`` behaves identically to the ``cmd-calc``
console script.
"""

from __future__ import annotations

from cmdcalc.cli.app import cli

if __name__ == "__main__":
    cli()
