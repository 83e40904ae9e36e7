"""Error hierarchy for the inicfg parser."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "IniError",
    "ConfigNotFoundError",
    "ConfigError",
    "FileAccessError",
    "IniValidationError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "ErrorCodes",
]


class IniError(Exception):
    """Base error for all inicfg errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(IniError):
    """Raised when a parser settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(IniError):
    """Raised when parser settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class FileAccessError(IniError):
    """Raised when the INI file is missing or cannot be read."""

    def __init__(self, file_path: str, reason: str | None = None, **kwargs: Any) -> None:
        if reason is None:
            code = "INI_FILE_NOT_FOUND"
            message = f"INI file not found: {file_path}"
        else:
            code = "INI_FILE_UNREADABLE"
            message = f"Cannot read INI file {file_path}: {reason}"
        super().__init__(
            code=code,
            message=message,
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )

    @property
    def file_path(self) -> str:
        """The path that could not be opened."""
        return self.details["file_path"]


class IniValidationError(IniError):
    """Raised when a file contains one or more malformed lines.

    The message lists every problem found in the file, one per line.
    """

    def __init__(
        self,
        file_path: str,
        issues: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        issues = issues or []
        lines = [f"line {i['line']}: {i['message']}" for i in issues]
        super().__init__(
            code="INI_VALIDATION_ERROR",
            message=f"{len(issues)} error(s) in {file_path}:\n" + "\n".join(lines),
            details={"file_path": file_path, "issues": issues},
            **kwargs,
        )

    @property
    def issues(self) -> list[dict[str, Any]]:
        """Every collected issue as a dict with 'line', 'code', 'message' keys."""
        return self.details["issues"]

    @property
    def line_numbers(self) -> list[int]:
        """Line numbers of all collected issues, in file order."""
        return [i["line"] for i in self.details["issues"]]


class KeyNotFoundError(IniError, KeyError):
    """Raised when a qualified key is not in the store."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="INI_KEY_NOT_FOUND",
            message=f"Key not found: {key}",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The requested identifier."""
        return self.details["key"]


class TypeMismatchError(IniError, TypeError):
    """Raised when a stored value is not of the requested type."""

    def __init__(self, key: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="INI_TYPE_MISMATCH",
            message=f"Type mismatch for {key}: expected {expected}, stored as {actual}",
            details={"key": key, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The requested identifier."""
        return self.details["key"]

    @property
    def expected(self) -> str:
        """Name of the requested value type."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """Name of the stored value type."""
        return self.details["actual"]


class UnsupportedTypeError(IniError, ValueError):
    """Raised when a lookup asks for a type other than int, float or str."""

    def __init__(self, requested: object, **kwargs: Any) -> None:
        super().__init__(
            code="INI_UNSUPPORTED_TYPE",
            message=f"Unsupported value type: {requested!r}",
            details={"requested": repr(requested)},
            **kwargs,
        )


class ErrorCodes:
    """All inicfg error codes as constants.

    Example:
        if error.code == ErrorCodes.INI_KEY_NOT_FOUND:
            use_default()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INI_FILE_NOT_FOUND = "INI_FILE_NOT_FOUND"
    INI_FILE_UNREADABLE = "INI_FILE_UNREADABLE"
    INI_VALIDATION_ERROR = "INI_VALIDATION_ERROR"
    INI_KEY_NOT_FOUND = "INI_KEY_NOT_FOUND"
    INI_TYPE_MISMATCH = "INI_TYPE_MISMATCH"
    INI_UNSUPPORTED_TYPE = "INI_UNSUPPORTED_TYPE"
    INVALID_SECTION = "INVALID_SECTION"
    INVALID_KEY_VALUE = "INVALID_KEY_VALUE"
    MISSING_VALUE = "MISSING_VALUE"
    KEY_WITHOUT_SECTION = "KEY_WITHOUT_SECTION"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
