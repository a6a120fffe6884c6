"""Shared pytest fixtures and configuration for the cmd-calc test suite.

Guidelines
----------
* No real terminal interaction in any test.
* questionary must be mocked at the prompt boundary.
* Core tests must be pure — no side effects.
* Session output is asserted through ``capsys`` or a recording view.
"""

from __future__ import annotations
