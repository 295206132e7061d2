"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use TMPL_ prefix (e.g., TMPL_DELIMITER=%).

Settings can also be loaded from a .env file in the working directory.
These values only seed the CLI defaults; the run itself is driven by the
frozen SubstConfig built from them once at startup.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use TMPL_ prefix.

    Examples:
        TMPL_DELIMITER=%
        TMPL_MATCH_MODE=legacy
        TMPL_INDEXED=true
    """

    model_config = SettingsConfigDict(
        env_prefix="TMPL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Marker configuration
    delimiter: str = Field(
        default="#",
        description="Character marking directive lines and section boundaries",
    )

    special: str = Field(
        default="",
        description="Reserved secondary marker (accepted, currently unused)",
    )

    whole_file_name: str = Field(
        default="@CONTENT",
        description="Reserved directive name that copies the whole source file",
    )

    preamble_name: str = Field(
        default="@HEADER",
        description="Reserved name for the lines before the first section boundary",
    )

    # Lookup configuration
    match_mode: Literal["strict", "legacy"] = Field(
        default="strict",
        description="strict: exact name match; legacy: length-bounded prefix match",
    )

    indexed: bool = Field(
        default=False,
        description="Index section boundaries once instead of rescanning per directive",
    )

    # I/O configuration
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the template and source files",
    )

    @field_validator("match_mode", mode="before")
    @classmethod
    def matchMode_normalize(cls, value: object) -> object:
        """Accept STRICT / Legacy etc. from the environment"""
        if isinstance(value, str):
            return value.strip().lower()
        return value


# Singleton instance - import this in your code
appsettings = AppSettings()
