"""
Run configuration model

SubstConfig is the single immutable configuration value of a run. It is
built once at startup (from settings and CLI options) and handed to every
component; nothing reads process-wide configuration after that point.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .directives import MatchMode, WHOLE_FILE_NAME, PREAMBLE_NAME


class SubstConfig(BaseModel):
    """
    Frozen configuration for one substitution run

    Attributes:
        delimiter: Character that starts directive lines (template) and
                   section-boundary lines (source)
        special: Reserved secondary marker, empty when unset
        whole_file_name: Directive name that copies the entire source
        preamble_name: Name of the implicit section before the first boundary
        match_mode: How requested names are compared with boundary names
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default="#")
    special: str = Field(default="")
    whole_file_name: str = Field(default=WHOLE_FILE_NAME)
    preamble_name: str = Field(default=PREAMBLE_NAME)
    match_mode: MatchMode = Field(default=MatchMode.STRICT)

    @field_validator("delimiter")
    @classmethod
    def delimiter_check(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be exactly one character")
        if value.isspace():
            raise ValueError("delimiter must not be whitespace")
        return value

    @field_validator("special")
    @classmethod
    def special_check(cls, value: str) -> str:
        if len(value) > 1:
            raise ValueError("special marker must be at most one character")
        return value

    @classmethod
    def config_create(cls, settings: Optional[Any] = None, **overrides: Any) -> "SubstConfig":
        """
        Build the run configuration from settings plus explicit overrides.

        Args:
            settings: AppSettings-like object; defaults to the tmpl singleton
            **overrides: Field values that win over settings (None is ignored)

        Returns:
            Frozen SubstConfig

        Example:
            >>> SubstConfig.config_create(delimiter="%").delimiter
            '%'
        """
        if settings is None:
            from ..config import appsettings

            settings = appsettings

        values = {
            "delimiter": settings.delimiter,
            "special": settings.special,
            "whole_file_name": settings.whole_file_name,
            "preamble_name": settings.preamble_name,
            "match_mode": settings.match_mode,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
