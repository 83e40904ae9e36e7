"""Recognizers for section headers and key=value lines.

Both functions take a line that has already been comment-stripped, trimmed
and checked to be non-empty. Neither touches parser state; the orchestrator
decides what to do with the result.
"""

from __future__ import annotations

from dataclasses import dataclass

from inicfg.scanner import WHITESPACE

__all__ = ["SectionMatch", "recognize_section", "recognize_key", "split_value"]


@dataclass(frozen=True)
class SectionMatch:
    """Result of testing a line for a section header.

    Attributes:
        is_header: The line starts with ``[``.
        malformed: The header is unterminated or has an empty name.
        name: The lowercased section name for a well-formed header.
    """

    is_header: bool
    malformed: bool = False
    name: str | None = None


_NOT_A_HEADER = SectionMatch(is_header=False)
_MALFORMED = SectionMatch(is_header=True, malformed=True)


def recognize_section(line: str) -> SectionMatch:
    """Classify *line* as a non-header, a malformed header or a named header."""
    if not line.startswith("["):
        return _NOT_A_HEADER
    if len(line) < 2 or not line.endswith("]"):
        return _MALFORMED
    name = line[1:-1].strip(WHITESPACE)
    if not name:
        return _MALFORMED
    return SectionMatch(is_header=True, name=name.lower())


def recognize_key(line: str) -> str | None:
    """Return the lowercased key of a key=value line, or None if malformed."""
    key, sep, _ = line.partition("=")
    if not sep:
        return None
    key = key.strip(WHITESPACE)
    if not key:
        return None
    return key.lower()


def split_value(line: str) -> str:
    """Return the trimmed text after the first ``=``."""
    return line.partition("=")[2].strip(WHITESPACE)
