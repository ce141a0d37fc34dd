"""Tests for the owner settings (config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from encapsulate_record.config import OwnerSettings, load_settings
from encapsulate_record.exceptions import ConfigurationError


class TestOwnerSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.first_name == "Kaio"
        assert settings.last_name == "Silveira"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_OWNER_FIRST_NAME", "Enzo")
        settings = load_settings()
        assert settings.first_name == "Enzo"
        assert settings.last_name == "Silveira"

    def test_dotenv_read_from_working_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text(
            "DEFAULT_OWNER_FIRST_NAME=Gabriella\nDEFAULT_OWNER_LAST_NAME=Caetano\n",
            encoding="utf-8",
        )
        settings = load_settings()
        assert settings.as_fields() == {"first_name": "Gabriella", "last_name": "Caetano"}

    def test_defaults_ignore_dotenv_outside_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        project = tmp_path / "project"
        project.mkdir()
        (project / ".env").write_text("DEFAULT_OWNER_FIRST_NAME=Smith\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_settings().first_name == "Kaio"

    def test_explicit_overrides(self) -> None:
        assert load_settings(last_name="Caetano").last_name == "Caetano"

    def test_as_fields(self) -> None:
        fields = OwnerSettings(first_name="Gabriella", last_name="Caetano").as_fields()
        assert fields == {"first_name": "Gabriella", "last_name": "Caetano"}

    def test_invalid_value_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(first_name=["not", "a", "name"])
        assert exc_info.value.hint is not None
