"""Status codes and the exception that carries them."""

from __future__ import annotations

import os
import threading
from enum import IntEnum

__all__ = ["StatusCode", "UwError", "define_status", "status_str", "MAX_STATUS_CODE"]

# Status codes occupy a 15-bit field.
MAX_STATUS_CODE = 0x7FFF


class StatusCode(IntEnum):
    """Built-in status codes."""

    SUCCESS = 0
    VA_END = 1
    ERRNO = 2
    OOM = 3
    NOT_IMPLEMENTED = 4
    INCOMPATIBLE_TYPE = 5
    EOF = 6
    DATA_SIZE_TOO_BIG = 7
    INDEX_OUT_OF_RANGE = 8
    ITERATION_IN_PROGRESS = 9
    EXTRACT_FROM_EMPTY_ARRAY = 10
    KEY_NOT_FOUND = 11
    FILE_ALREADY_OPENED = 12
    NOT_REGULAR_FILE = 13
    UNREAD_FAILED = 14


_lock = threading.Lock()
_status_names: list[str] = [code.name for code in StatusCode]


def define_status(name: str) -> int:
    """Register a status name and return its code.

    Defining a name that already exists returns the existing code.
    """
    if not isinstance(name, str) or not name:
        raise ValueError("status name must be a non-empty string")
    with _lock:
        if name in _status_names:
            return _status_names.index(name)
        code = len(_status_names)
        if code > MAX_STATUS_CODE:
            raise OverflowError(f"cannot define more than {MAX_STATUS_CODE + 1} statuses")
        _status_names.append(name)
        return code


def status_str(code: int) -> str:
    """Return the name registered for a status code."""
    with _lock:
        if isinstance(code, int) and 0 <= code < len(_status_names):
            return _status_names[code]
    raise ValueError(f"unknown status code: {code!r}")


class UwError(Exception):
    """An error status raised by the library."""

    def __init__(
        self,
        code: int,
        description: str | None = None,
        *,
        errno: int = 0,
        file_name: str | None = None,
        line_number: int = 0,
    ) -> None:
        name = status_str(code)
        if code == StatusCode.SUCCESS:
            raise ValueError("success is not an error status")
        self.code = StatusCode(code) if code < len(StatusCode) else int(code)
        self.name = name
        self.description = description
        self.errno = errno
        self.file_name = file_name
        self.line_number = line_number
        super().__init__(str(self))

    @property
    def is_eof(self) -> bool:
        """True if this status marks the end of data."""
        return self.code == StatusCode.EOF

    def __str__(self) -> str:
        parts = [self.name]
        if self.code == StatusCode.ERRNO:
            parts.append(f"{self.errno} {os.strerror(self.errno)}")
        if self.description:
            parts.append(self.description)
        text = ": ".join(parts)
        if self.file_name:
            text += f" ({self.file_name}:{self.line_number})"
        return text

    def __repr__(self) -> str:
        return f"UwError({self.name}, {self.description!r})"