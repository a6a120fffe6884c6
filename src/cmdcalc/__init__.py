"""cmd-calc — interactive command-line calculator.

Reads ``<command> <operand1> <operand2>`` lines, validates them, and
prints the result of one of four arithmetic operations.
"""

from cmdcalc.version import __version__

__all__: list[str] = ["__version__"]
