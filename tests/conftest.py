"""Shared fixtures for the inicfg test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from inicfg.config import Config


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes dedented INI text to a temp file and returns its path."""

    def factory(content: str, name: str = "config.ini") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return factory


@pytest.fixture
def sample_ini(write_ini: Callable[..., Path]) -> Path:
    """A valid file exercising every value type and comment placement."""
    return write_ini(
        """\
        ; database settings
        [Database]
        Host = db.example.com ; primary
        port = 5432
        timeout = 2.5

        [server]
        name = Main Server
        workers = +007
        ratio = -0.75
        version = 3.14.15
        """
    )


@pytest.fixture
def parser_config() -> Config:
    """A Config with explicit parser settings."""
    return Config({"parser": {"comment_prefix": "#", "encoding": "utf-8", "integer_bits": 64}})
