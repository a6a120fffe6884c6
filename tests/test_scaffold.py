"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import io

import pytest

from cmdcalc import __version__
from cmdcalc.cli import exit_codes
from cmdcalc.cli.app import cli, main
from cmdcalc.cli.prompt import StreamLineReader
from cmdcalc.exceptions import (
    CmdCalcError,
    EnvironmentError,
    ExtraneousInputError,
    InputError,
    InvalidInputError,
    MissingOperandError,
    RetryExhaustedError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InputError,
            InvalidInputError,
            MissingOperandError,
            ExtraneousInputError,
            RetryExhaustedError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[CmdCalcError]
    ) -> None:
        assert issubclass(exc_class, CmdCalcError)

    def test_missing_operand_is_invalid_input(self) -> None:
        assert issubclass(MissingOperandError, InvalidInputError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CmdCalcError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CmdCalcError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = CmdCalcError("boom")
        assert err.hint is None

    def test_invalid_input_message_names_token(self) -> None:
        err = InvalidInputError("mod")
        assert err.token == "mod"
        assert str(err) == "Invalid/Unrecognised input mod received!"

    def test_extraneous_input_message_names_token(self) -> None:
        err = ExtraneousInputError("4")
        assert str(err) == "Extraneous input 4 received!"

    def test_empty_token_shows_category_only(self) -> None:
        assert str(InvalidInputError("")) == "Invalid/Unrecognised input"

    def test_missing_operand_message(self) -> None:
        assert str(MissingOperandError("add")) == 'Missing operand(s) for "add"!'


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_retry_exhausted_is_three(self) -> None:
        assert exit_codes.RETRY_EXHAUSTED == 3

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--verbose" in capsys.readouterr().out

    def test_positional_argument_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["add"])
        assert exc_info.value.code == 2

    def test_no_args_runs_session(self) -> None:
        reader = StreamLineReader(io.StringIO("quit\n"))
        assert main([], reader=reader) == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_known_error_exits_general_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from cmdcalc.cli import app as app_module

        def _boom(*_args: object, **_kwargs: object) -> int:
            raise EnvironmentError("questionary is not installed.", hint="pip it")

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "questionary is not installed." in err
        assert "pip it" in err

    def test_keyboard_interrupt_exits_130(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from cmdcalc.cli import app as app_module

        def _interrupt(*_args: object, **_kwargs: object) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted by user." in capsys.readouterr().err

    def test_unexpected_error_exits_two(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from cmdcalc.cli import app as app_module

        def _crash(*_args: object, **_kwargs: object) -> int:
            raise AssertionError("Unhandled operation")

        monkeypatch.setattr(app_module, "main", _crash)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "AssertionError: Unhandled operation" in capsys.readouterr().err

    def test_success_exit_code_propagates(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from cmdcalc.cli import app as app_module

        monkeypatch.setattr(app_module, "main", lambda: exit_codes.RETRY_EXHAUSTED)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.RETRY_EXHAUSTED
