"""Runtime settings for command execution.

Uses pydantic-settings so values can be supplied through PGCOMMAND_*
environment variables or a .env file.
"""

import codecs
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CommandSettings(BaseSettings):
    """Settings shared by the default executors.

    Example:
        ```bash
        export PGCOMMAND_ENCODING=latin-1
        export PGCOMMAND_DEFAULT_TIMEOUT=30
        ```
    """

    encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode captured output (invalid bytes are replaced)",
    )
    default_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout in seconds applied when a caller passes none; unset means unbounded",
    )

    model_config = SettingsConfigDict(
        env_prefix="PGCOMMAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        """Reject encodings Python cannot decode with."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value


@lru_cache(maxsize=1)
def get_settings() -> CommandSettings:
    """Get cached CommandSettings instance."""
    return CommandSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    get_settings.cache_clear()
