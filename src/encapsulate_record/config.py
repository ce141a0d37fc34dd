"""Configuration settings using Pydantic Settings.

The process-wide default owner starts from these values.

Usage:
    from encapsulate_record.config import load_settings

    # Load from environment variables (DEFAULT_OWNER_*) or .env
    settings = load_settings()

    # Or override with explicit values
    settings = load_settings(first_name="Enzo")
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from encapsulate_record.exceptions import ConfigurationError


class OwnerSettings(BaseSettings):  # type: ignore[misc]
    """Initial value of the process-wide default owner.

    Attributes:
        first_name: Given name of the initial owner.
        last_name: Family name of the initial owner.

    Environment Variables:
        DEFAULT_OWNER_FIRST_NAME
        DEFAULT_OWNER_LAST_NAME
    """

    model_config = SettingsConfigDict(
        env_prefix="DEFAULT_OWNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    first_name: str = "Kaio"
    last_name: str = "Silveira"

    def as_fields(self) -> dict[str, str]:
        """Return the settings as a field-bag for :class:`Person`."""
        return {"first_name": self.first_name, "last_name": self.last_name}


def load_settings(**overrides: Any) -> OwnerSettings:
    """Build :class:`OwnerSettings`, mapping validation failures to ours."""
    try:
        return OwnerSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid default owner settings: {exc}",
            hint="Check the DEFAULT_OWNER_* environment variables.",
        ) from exc
