"""Example consumer: parse an INI file and print a few values."""

from __future__ import annotations

import pathlib
import sys

from inicfg import IniError, IniParser

DEFAULT_FILE = pathlib.Path(__file__).resolve().parent / "ini" / "app.ini"


def main(path: str | None = None) -> int:
    try:
        parser = IniParser(path or DEFAULT_FILE)
        print(parser.get_value("section1.var2", str))
        print(parser.get_value("Section2.var2", str))
        print(parser.get_value("section1.var3", int))
    except IniError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
