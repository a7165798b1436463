"""Configuration for the rice-cli tool itself."""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rice_cli.errors import ConfigError
from rice_cli.paths import ENV_FILE, SETTINGS_FILE


class RiceSettings(BaseSettings):
    """rice-cli settings, overridable through RICE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RICE_",
        extra="ignore",
    )

    settings_filename: str = Field(
        default=SETTINGS_FILE,
        description="Name of the module-style settings document",
    )
    env_filename: str = Field(
        default=ENV_FILE,
        description="Name of the environment file holding connection parameters",
    )
    sdk_package: str = Field(
        default="rice-node-sdk",
        description="SDK package referenced by the settings document and install hint",
    )

    @field_validator("settings_filename", "env_filename")
    @classmethod
    def check_plain_file_name(cls, value: str) -> str:
        # Both files always live in the project root
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"expected a file name without directories, got {value!r}")
        return value

    @classmethod
    def load(cls) -> RiceSettings:
        """Load settings from the environment, falling back to built-in defaults.

        Raises:
            ConfigError: If a RICE_* variable holds an invalid value.
        """
        try:
            return cls()
        except ValidationError as e:
            raise ConfigError(f"Invalid rice-cli settings: {e}") from e


__all__ = ["RiceSettings"]
