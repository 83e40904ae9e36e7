"""Read-only store of parsed values with typed lookup."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from inicfg.errors import IniError, KeyNotFoundError, TypeMismatchError
from inicfg.types import IniValue, LookupResult, ValueType

__all__ = ["IniStore", "qualify"]


def qualify(section: str, key: str) -> str:
    """Build the qualified ``section.key`` identifier."""
    return f"{section}.{key}"


class IniStore(Mapping[str, IniValue]):
    """Immutable mapping of qualified key to tagged value.

    Keys are stored lowercase. Lookups lowercase the request but do not trim
    it. There is no mutation API, so concurrent reads need no locking.
    """

    def __init__(self, entries: Mapping[str, IniValue] | None = None, sections: list[str] | None = None) -> None:
        self._entries: Mapping[str, IniValue] = MappingProxyType(dict(entries or {}))
        self._sections: tuple[str, ...] = tuple(sections or ())

    def __getitem__(self, key: str) -> IniValue:
        try:
            return self._entries[key.lower()]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __repr__(self) -> str:
        return f"IniStore({dict(self._entries)!r})"

    def get_value(self, request: str, expected_type: ValueType | type) -> Any:
        """Return the value stored under *request*, asserting its type.

        Args:
            request: Qualified ``section.key`` identifier, any letter case.
            expected_type: ``int``, ``float``, ``str`` or a ValueType.

        Raises:
            KeyNotFoundError: If *request* is not stored.
            TypeMismatchError: If the stored variant differs from *expected_type*.
            UnsupportedTypeError: If *expected_type* is not int, float, str or a ValueType.
        """
        expected = ValueType.of(expected_type)
        entry = self[request]
        if entry.type is not expected:
            raise TypeMismatchError(request, expected=expected.value, actual=entry.type.value)
        return entry.value

    def lookup(self, request: str, expected_type: ValueType | type) -> LookupResult:
        """Like :meth:`get_value` but reports failure in the result instead of raising."""
        try:
            return LookupResult(ok=True, value=self.get_value(request, expected_type))
        except IniError as e:
            return LookupResult(ok=False, error=e)

    def sections(self) -> list[str]:
        """Section names that hold at least one entry, in first-seen order."""
        return list(self._sections)
