"""Parser settings loading and validation."""

from __future__ import annotations

import codecs
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inicfg.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "ParserSettings"]


class ParserSettings(BaseModel):
    """Validated settings for the ``parser`` section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    comment_prefix: str = Field(default=";", min_length=1, max_length=1)
    encoding: str = "utf-8-sig"
    integer_bits: int = Field(default=32, ge=8, le=64)

    @field_validator("comment_prefix")
    @classmethod
    def _not_syntax_char(cls, v: str) -> str:
        if v in "[]=" or v.isspace():
            raise ValueError(f"{v!r} cannot be used as a comment prefix")
        return v

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding {v!r}") from None
        return v


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load settings from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def parser_settings(self) -> ParserSettings:
        """Validate and return the ``parser`` section.

        Raises:
            ConfigError: If any parser setting is invalid.
        """
        section = self.get("parser")
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(f"'parser' must be a mapping, got {type(section).__name__}")
        try:
            return ParserSettings(**section)
        except ValidationError as e:
            raise ConfigError(f"Invalid parser settings: {e}", cause=e) from e
