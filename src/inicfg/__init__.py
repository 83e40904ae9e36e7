"""inicfg - INI-style configuration parser with typed lookup."""

from __future__ import annotations

# Core
from inicfg.parser import IniParser, parse_file, parse_lines
from inicfg.store import IniStore

# Types
from inicfg.types import IniValue, LookupResult, ParseIssue, ParseResult, ValueType

# Building blocks
from inicfg.inference import infer_value
from inicfg.recognizers import SectionMatch, recognize_key, recognize_section, split_value
from inicfg.scanner import scan_lines

# Config
from inicfg.config import Config, ParserSettings

# Errors
from inicfg.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FileAccessError,
    IniError,
    IniValidationError,
    KeyNotFoundError,
    TypeMismatchError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "IniParser",
    "IniStore",
    "parse_file",
    "parse_lines",
    # Types
    "ValueType",
    "IniValue",
    "ParseIssue",
    "ParseResult",
    "LookupResult",
    # Building blocks
    "scan_lines",
    "recognize_section",
    "recognize_key",
    "split_value",
    "SectionMatch",
    "infer_value",
    # Config
    "Config",
    "ParserSettings",
    # Errors
    "ErrorCodes",
    "IniError",
    "FileAccessError",
    "IniValidationError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "ConfigError",
    "ConfigNotFoundError",
]
