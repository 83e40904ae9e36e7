"""IniParser: the parse-file driver that builds an IniStore."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable

from inicfg.config import Config, ParserSettings
from inicfg.errors import ErrorCodes, FileAccessError
from inicfg.inference import infer_value
from inicfg.recognizers import recognize_key, recognize_section, split_value
from inicfg.scanner import scan_lines
from inicfg.store import IniStore, qualify
from inicfg.types import IniValue, LookupResult, ParseIssue, ParseResult, ValueType

__all__ = ["IniParser", "parse_file", "parse_lines"]

logger = logging.getLogger(__name__)


def _resolve_settings(config: Config | ParserSettings | None) -> ParserSettings:
    if config is None:
        return ParserSettings()
    if isinstance(config, ParserSettings):
        return config
    return config.parser_settings()


def parse_lines(
    source: Iterable[str],
    file_path: str = "<string>",
    settings: ParserSettings | None = None,
) -> ParseResult:
    """Parse an iterable of raw lines into a ParseResult.

    Every malformed line is recorded; none stops the scan. The store is only
    attached to the result when no issue was found.
    """
    settings = settings or ParserSettings()
    entries: dict[str, IniValue] = {}
    sections: list[str] = []
    issues: list[ParseIssue] = []
    section: str | None = None

    for line_number, line in scan_lines(source, settings.comment_prefix):
        if not line:
            continue

        match = recognize_section(line)
        if match.malformed:
            section = None
            issues.append(ParseIssue(line_number, ErrorCodes.INVALID_SECTION, "invalid section name"))
            continue
        if match.is_header:
            section = match.name
            if "." in section:
                logger.warning(f"Section name '{section}' at line {line_number} contains '.'")
            logger.debug(f"Entered section '{section}' at line {line_number}")
            continue

        key = recognize_key(line)
        if key is None:
            issues.append(ParseIssue(line_number, ErrorCodes.INVALID_KEY_VALUE, "invalid key=value line"))
            continue

        raw = split_value(line)
        if not raw:
            issues.append(
                ParseIssue(
                    line_number,
                    ErrorCodes.MISSING_VALUE,
                    f"missing value for key {key} in section {section or ''}",
                )
            )
            continue
        if section is None:
            issues.append(
                ParseIssue(line_number, ErrorCodes.KEY_WITHOUT_SECTION, f"key {key} given with no section")
            )
            continue

        if "." in key:
            logger.warning(f"Key name '{key}' at line {line_number} contains '.'")
        qualified = qualify(section, key)
        value = infer_value(raw, settings.integer_bits)
        if qualified in entries:
            logger.warning(f"Line {line_number} overrides earlier value of '{qualified}'")
        elif section not in sections:
            sections.append(section)
        entries[qualified] = value
        logger.debug(f"Stored {qualified} = {value.value!r} ({value.type.value})")

    if issues:
        return ParseResult(file_path=file_path, valid=False, issues=issues)
    return ParseResult(file_path=file_path, valid=True, store=IniStore(entries, sections))


def parse_file(
    path: str | os.PathLike[str],
    config: Config | ParserSettings | None = None,
) -> ParseResult:
    """Parse the INI file at *path*.

    Validation problems are reported in the returned ParseResult.

    Raises:
        FileAccessError: If the file does not exist or cannot be read.
        ConfigError: If *config* holds invalid parser settings.
    """
    settings = _resolve_settings(config)
    file_path = os.fspath(path)
    if not os.path.exists(file_path):
        raise FileAccessError(file_path)

    try:
        with open(file_path, encoding=settings.encoding) as f:
            logger.debug(f"Parsing {file_path}")
            result = parse_lines(f, file_path, settings)
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(file_path, reason=str(e), cause=e) from e

    if result.store is not None:
        logger.info(f"Parsed {file_path}: {len(result.store)} entries")
    return result


class IniParser:
    """Parses an INI file on construction and serves typed lookups.

    Construction either yields a fully populated, read-only store or raises.

    Example::

        parser = IniParser("app.ini")
        port = parser.get_value("server.port", int)

    Raises:
        FileAccessError: If the file does not exist or cannot be read.
        IniValidationError: If any line is malformed; lists every bad line.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        config: Config | ParserSettings | None = None,
    ) -> None:
        result = parse_file(path, config)
        if result.store is None:
            raise result.to_error()
        self._path = result.file_path
        self._store = result.store

    @property
    def path(self) -> str:
        return self._path

    @property
    def store(self) -> IniStore:
        return self._store

    def get_value(self, request: str, expected_type: ValueType | type) -> Any:
        """Return the value under *request*; see :meth:`IniStore.get_value`."""
        return self._store.get_value(request, expected_type)

    def lookup(self, request: str, expected_type: ValueType | type) -> LookupResult:
        """Result-returning form of :meth:`get_value`."""
        return self._store.lookup(request, expected_type)

    def keys(self) -> list[str]:
        return list(self._store)

    def __contains__(self, request: object) -> bool:
        return request in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"IniParser(path={self._path!r}, entries={len(self._store)})"
