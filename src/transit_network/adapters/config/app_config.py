"""12-factor configuration adapter using environment variables."""

import codecs
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    network_file: str | None = Field(
        default=None,
        description="Network file used by the CLI when no file argument is given",
    )
    file_encoding: str = Field(default="utf-8", description="Text encoding of network files")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, v: str) -> str:
        """Validate the encoding is known to Python's codec registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown file_encoding: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard level names."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def logging_level(self) -> int:
        """The configured level as a ``logging`` constant."""
        return logging.getLevelNamesMapping()[self.log_level]
