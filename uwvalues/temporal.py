"""Date/time and timestamp values, with monotonic clock helpers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, ClassVar

from .status import StatusCode, UwError
from .typesys import REGISTRY, TypeId
from .values import UNSIGNED_MAX, Value

__all__ = ["DateTime", "Timestamp", "monotonic", "timestamp_sum", "timestamp_diff"]

_NS_PER_SECOND = 1_000_000_000


def _check_range(name: str, value: Any, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range [{low}, {high}]: {value}")


def _fraction(nanoseconds: int) -> str:
    return f".{nanoseconds:09d}" if nanoseconds else ""


@dataclass(frozen=True, eq=False)
class DateTime(Value):
    """A calendar date and time with an optional offset from GMT in minutes."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    gmt_offset: int = 0
    tzindex: int = 0
    type_id: ClassVar[int] = TypeId.DATETIME

    def __post_init__(self) -> None:
        _check_range("year", self.year, 0, 0xFFFF)
        for name in ("month", "day", "hour", "minute", "second", "tzindex"):
            _check_range(name, getattr(self, name), 0, 0xFF)
        _check_range("nanosecond", self.nanosecond, 0, _NS_PER_SECOND - 1)
        _check_range("gmt_offset", self.gmt_offset, -0x8000, 0x7FFF)

    def to_string(self) -> str:
        raise UwError(StatusCode.NOT_IMPLEMENTED, "DateTime has no string form")

    def _detail(self) -> str:
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        text += _fraction(self.nanosecond)
        if self.gmt_offset:
            sign = "-" if self.gmt_offset < 0 else "+"
            hours, minutes = divmod(abs(self.gmt_offset), 60)
            text += f"{sign}{hours:02d}:{minutes:02d}"
        return text

    def describe(self) -> str:
        """Return a one-line dump of the date and time."""
        return f"{self.type_name}: {self._detail()}"

    def __bool__(self) -> bool:
        return all(
            (self.year, self.month, self.day, self.hour,
             self.minute, self.second, self.nanosecond)
        )

    def _key(self) -> tuple[int, ...]:
        return (
            self.year, self.month, self.day, self.hour, self.minute,
            self.second, self.nanosecond, self.gmt_offset,
        )

    def _equal_sametype(self, other: Value) -> bool:
        return self._key() == other._key()  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        if not REGISTRY.is_subtype(other.type_id, TypeId.DATETIME):
            return False
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((TypeId.DATETIME, *self._key()))


@dataclass(frozen=True, eq=False)
class Timestamp(Value):
    """A point in time as whole seconds plus nanoseconds."""

    seconds: int = 0
    nanoseconds: int = 0
    type_id: ClassVar[int] = TypeId.TIMESTAMP

    def __post_init__(self) -> None:
        _check_range("seconds", self.seconds, 0, UNSIGNED_MAX)
        _check_range("nanoseconds", self.nanoseconds, 0, _NS_PER_SECOND - 1)

    def to_string(self) -> str:
        return f"{self.seconds}.{self.nanoseconds:09d}"

    def _detail(self) -> str:
        return f"{self.seconds}{_fraction(self.nanoseconds)}"

    def describe(self) -> str:
        """Return a one-line dump of the timestamp."""
        return f"{self.type_name}: {self._detail()}"

    def __bool__(self) -> bool:
        return self.seconds != 0 and self.nanoseconds != 0

    def _total_ns(self) -> int:
        return self.seconds * _NS_PER_SECOND + self.nanoseconds

    def _equal_sametype(self, other: Value) -> bool:
        return self._total_ns() == other._total_ns()  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        if not REGISTRY.is_subtype(other.type_id, TypeId.TIMESTAMP):
            return False
        return self._total_ns() == other._total_ns()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((TypeId.TIMESTAMP, self.seconds, self.nanoseconds))


def _from_ns(total: int) -> Timestamp:
    if total < 0:
        raise OverflowError("timestamp would be negative")
    seconds, nanoseconds = divmod(total, _NS_PER_SECOND)
    if seconds > UNSIGNED_MAX:
        raise OverflowError("timestamp seconds do not fit 64 bits")
    return Timestamp(seconds, nanoseconds)


def _expect_timestamp(value: Any) -> Timestamp:
    if not isinstance(value, Timestamp):
        raise UwError(
            StatusCode.INCOMPATIBLE_TYPE,
            f"Timestamp expected, got {type(value).__name__}",
        )
    return value


def monotonic() -> Timestamp:
    """Return the current reading of the monotonic clock."""
    return _from_ns(time.monotonic_ns())


def timestamp_sum(a: Timestamp, b: Timestamp) -> Timestamp:
    """Return a + b."""
    return _from_ns(_expect_timestamp(a)._total_ns() + _expect_timestamp(b)._total_ns())


def timestamp_diff(a: Timestamp, b: Timestamp) -> Timestamp:
    """Return a - b; raise OverflowError if b is later than a."""
    return _from_ns(_expect_timestamp(a)._total_ns() - _expect_timestamp(b)._total_ns())