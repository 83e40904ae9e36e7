"""Line scanner: comment stripping and trimming of raw input lines."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["WHITESPACE", "strip_comment", "scan_lines"]

# space, tab, newline, carriage return, form feed, vertical tab
WHITESPACE = " \t\n\r\f\v"


def strip_comment(line: str, comment_prefix: str = ";") -> str:
    """Drop everything from the first comment character, then trim."""
    index = line.find(comment_prefix)
    if index != -1:
        line = line[:index]
    return line.strip(WHITESPACE)


def scan_lines(source: Iterable[str], comment_prefix: str = ";") -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, content)`` for every physical line of *source*.

    Line numbers are 1-based. Lines that are empty after stripping are still
    yielded so the caller keeps counting them.
    """
    for line_number, raw in enumerate(source, start=1):
        yield line_number, strip_comment(raw, comment_prefix)
