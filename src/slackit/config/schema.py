"""Pydantic models for command-line options and runtime settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CliOptions(BaseModel):
    """Validated options bag produced from the parsed command line."""

    model_config = ConfigDict(frozen=True)

    token: str | None = None
    channel: str | None = None
    user: str | None = None
    message: str | None = None
    name: str | None = None

    @model_validator(mode="after")
    def check_single_target(self) -> "CliOptions":
        """Require exactly one of channel or user."""
        if self.channel is not None and self.user is not None:
            raise ValueError("Only one of channel or user may be given")
        if self.channel is None and self.user is None:
            raise ValueError("One of channel or user is required")
        return self


class SlackitSettings(BaseSettings):
    """Runtime settings read from ``SLACKIT_*`` environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"
    backtrace: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SLACKIT_",
        extra="ignore",
    )
