"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DESKTOP_CLIENT_PATTERN = r"^Mozilla/5\.0 \([A-Za-z ]+\) (mirall|csyncoC)/.*$"
ANDROID_CLIENT_PATTERN = r"^Mozilla/5\.0 \(Android\) (ownCloud|Nextcloud)-android.*$"
IOS_CLIENT_PATTERN = r"^Mozilla/5\.0 \(iOS\) (ownCloud|Nextcloud)-iOS.*$"


class Settings(BaseSettings):
    """Configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        env_prefix="DOWNLOAD_ACTIVITY_",
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./download_activity.db",
        description="Database connection URL used by SQLAlchemy for the reference stores",
        min_length=1,
    )
    base_url: str = Field(
        default="http://localhost",
        description="Absolute URL of the host application, used to build viewer links",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone (or UTC+hh:mm offset) used for event timestamps",
    )
    require_png_icons: bool = Field(
        default=False,
        description="Serve PNG activity icons instead of SVG for clients that need them",
    )
    partial_upload_suffix: str = Field(
        default=".part",
        description="Suffix of incomplete upload artifacts that never produce events",
        min_length=1,
    )
    download_start_parameter: str = Field(
        default="downloadStartSecret",
        description="Query parameter marking an explicit, user initiated download",
    )
    thumbnail_parameters: tuple[str, str] = Field(
        default=("x", "y"),
        description="Query parameters that together identify a thumbnail request",
    )
    desktop_user_agent_pattern: str = Field(
        default=DESKTOP_CLIENT_PATTERN,
        description="Regular expression matching the desktop sync client",
    )
    mobile_user_agent_patterns: list[str] = Field(
        default_factory=lambda: [ANDROID_CLIENT_PATTERN, IOS_CLIENT_PATTERN],
        description="Regular expressions matching the phone and tablet apps",
    )
    merge_window_seconds: int = Field(
        default=3 * 60 * 60,
        description="Largest gap between two feed entries that may still be grouped",
        gt=0,
    )
    max_merged_parameters: int = Field(
        default=5,
        description="Largest number of distinct values a grouped entry may list",
        ge=1,
        le=5,
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
