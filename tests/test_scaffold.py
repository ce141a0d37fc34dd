"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from encapsulate_record import __version__
from encapsulate_record.cli import exit_codes
from encapsulate_record.cli.app import main
from encapsulate_record.exceptions import (
    ConfigurationError,
    EncapsulateRecordError,
    InvalidArgumentError,
    MissingDependencyError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
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
        [InvalidArgumentError, ConfigurationError, MissingDependencyError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[EncapsulateRecordError]
    ) -> None:
        assert issubclass(exc_class, EncapsulateRecordError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(EncapsulateRecordError, Exception)

    def test_hint_is_stored(self) -> None:
        err = EncapsulateRecordError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert EncapsulateRecordError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["launch"])
        assert exc_info.value.code == 2

    def test_show_routes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from encapsulate_record.cli import app as app_module

        seen: list[tuple[str | None, str | None]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_show",
            lambda first, last: seen.append((first, last)) or exit_codes.SUCCESS,
        )
        assert main(["show", "--first-name", "Enzo"]) == exit_codes.SUCCESS
        assert seen == [("Enzo", None)]

    def test_demo_routes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from encapsulate_record.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_demo", lambda: exit_codes.SUCCESS)
        assert main(["demo"]) == exit_codes.SUCCESS
