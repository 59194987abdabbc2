"""Error taxonomy for the countdown domain.

Every failure that should reach the user derives from CountdownError so the
command handler can report it and pick an exit code in one place.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    FORMAT_ERROR = "FORMAT_ERROR"


class CountdownError(Exception):
    """Base error with code and user-safe message."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgument(CountdownError):
    """Raised for bad command-line input (malformed date, non-positive limit)."""

    code = ErrorCode.INVALID_ARGUMENT


class ValidationError(CountdownError):
    """Raised when an event fails its invariants before it is persisted."""

    code = ErrorCode.VALIDATION_ERROR


class _FileError(CountdownError):
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class StorageError(_FileError):
    """Raised when the event file cannot be read or written."""

    code = ErrorCode.STORAGE_ERROR


class FormatError(_FileError):
    """Raised when the event file exists but its contents are not well-formed."""

    code = ErrorCode.FORMAT_ERROR
