"""Closed error taxonomy.

Every kind except ROOT_UNAVAILABLE is recoverable: the unit (file or
directory) is skipped and reported, and the walk continues.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    DECODE_ERROR = "decode_error"
    WRITE_FAILURE = "write_failure"
    ROOT_UNAVAILABLE = "root_unavailable"
    INTERNAL = "internal"


class RootUnavailableError(Exception):
    """Raised when the scan root cannot be walked (or written outside dry-run)."""

    kind = ErrorKind.ROOT_UNAVAILABLE


def classify_error(exc: BaseException, *, writing: bool = False) -> ErrorKind:
    """Map a caught exception onto an ErrorKind.

    Any OSError raised while writing back is a WRITE_FAILURE, whatever its
    subclass.
    """
    if writing and isinstance(exc, OSError):
        return ErrorKind.WRITE_FAILURE
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, UnicodeDecodeError):
        return ErrorKind.DECODE_ERROR
    if isinstance(exc, OSError):
        return ErrorKind.ACCESS_DENIED
    return ErrorKind.INTERNAL
