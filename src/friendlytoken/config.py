"""Configuration for friendlytoken.

The token format itself is fixed and not configurable. The settings here only
control the surrounding web application and its logging, and are read from
environment variables with the ``FRIENDLYTOKEN_`` prefix.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from safir.logging import LogLevel, Profile, configure_logging

__all__ = ["Config"]


class Config(BaseSettings):
    """Configuration for friendlytoken."""

    model_config = SettingsConfigDict(
        env_prefix="FRIENDLYTOKEN_", case_sensitive=False
    )

    name: str = Field(
        "friendlytoken",
        title="Name of application",
        description="Used as the logger name and in application metadata",
    )

    profile: Profile = Field(
        Profile.development,
        title="Application logging profile",
        description=(
            "Use ``production`` for JSON logs and ``development`` for"
            " human-readable logs"
        ),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
    )

    path_prefix: str = Field(
        "",
        title="URL path prefix",
        description="Path prefix under which the token routes are served",
    )

    def configure_logging(self) -> None:
        """Configure logging based on the friendlytoken configuration."""
        configure_logging(
            name=self.name, profile=self.profile, log_level=self.log_level
        )
