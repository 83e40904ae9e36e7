"""Type inference for raw value text."""

from __future__ import annotations

import math

from inicfg.types import IniValue, ValueType

__all__ = ["parse_integer", "parse_float", "infer_value"]

_INTEGER_CHARS = frozenset("+-0123456789")
_FLOAT_CHARS = frozenset("+-0123456789.")


def parse_integer(raw: str, bits: int = 32) -> int | None:
    """Parse *raw* as a signed integer that fits in *bits*, else None."""
    if not raw or not set(raw) <= _INTEGER_CHARS:
        return None
    try:
        number = int(raw)
    except ValueError:
        return None
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        return None
    return number


def parse_float(raw: str) -> float | None:
    """Parse *raw* as a finite decimal number, else None."""
    if not raw or not set(raw) <= _FLOAT_CHARS:
        return None
    try:
        number = float(raw)
    except ValueError:
        return None
    if math.isinf(number):
        return None
    return number


def infer_value(raw: str, integer_bits: int = 32) -> IniValue:
    """Classify *raw* as Integer, then Float, falling back to String.

    Strings that only look numeric, such as ``"1.2.3"`` or ``"--5"``, are kept
    verbatim. Out-of-range numbers never raise; they fall through to the next
    candidate type.
    """
    integer = parse_integer(raw, integer_bits)
    if integer is not None:
        return IniValue(ValueType.INTEGER, integer)
    number = parse_float(raw)
    if number is not None:
        return IniValue(ValueType.FLOAT, number)
    return IniValue(ValueType.STRING, raw)
