"""Value and result types for the inicfg parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from inicfg.errors import IniError, IniValidationError, UnsupportedTypeError

if TYPE_CHECKING:
    from inicfg.store import IniStore

__all__ = [
    "ValueType",
    "IniValue",
    "ParseIssue",
    "ParseResult",
    "LookupResult",
]


class ValueType(str, Enum):
    """The primitive type inferred for a value."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @classmethod
    def of(cls, expected: ValueType | type) -> ValueType:
        """Map ``int``, ``float`` or ``str`` (or a ValueType) to a ValueType."""
        if isinstance(expected, ValueType):
            return expected
        for value_type, python_type in _PYTHON_TYPES.items():
            if expected is python_type:
                return value_type
        raise UnsupportedTypeError(expected)


_PYTHON_TYPES: dict[ValueType, type] = {
    ValueType.INTEGER: int,
    ValueType.FLOAT: float,
    ValueType.STRING: str,
}


@dataclass(frozen=True)
class IniValue:
    """A stored value tagged with its inferred type.

    Attributes:
        type: The inferred variant.
        value: The Python value; ``int``, ``float`` or ``str`` per ``type``.
    """

    type: ValueType
    value: Union[int, float, str]


@dataclass(frozen=True)
class ParseIssue:
    """One malformed line found while parsing.

    Attributes:
        line: 1-based line number in the source file.
        code: One of the line-level codes in ``ErrorCodes``.
        message: Human-readable description.
    """

    line: int
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "code": self.code, "message": self.message}


@dataclass
class ParseResult:
    """Outcome of parsing one file.

    ``store`` is only set when ``valid`` is True; a failed parse never
    exposes the partially built entries.
    """

    file_path: str
    valid: bool
    store: IniStore | None = None
    issues: list[ParseIssue] = field(default_factory=list)

    def to_error(self) -> IniValidationError:
        """Convert this result into an IniValidationError exception."""
        if self.valid:
            raise ValueError("Cannot convert valid result to error")
        return IniValidationError(
            file_path=self.file_path,
            issues=[issue.to_dict() for issue in self.issues],
        )


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a typed lookup: either ``value`` or ``error`` is set."""

    ok: bool
    value: Any = None
    error: IniError | None = None

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value
