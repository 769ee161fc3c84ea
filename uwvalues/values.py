"""Scalar values: Null, Bool, Signed, Unsigned, Float and Ptr."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from .status import StatusCode, UwError
from .typesys import REGISTRY, TypeId

__all__ = [
    "Value",
    "Null",
    "Bool",
    "Signed",
    "Unsigned",
    "Float",
    "Ptr",
    "equal",
    "SIGNED_MAX",
    "SIGNED_MIN",
    "UNSIGNED_MAX",
]

SIGNED_MAX = 0x7FFF_FFFF_FFFF_FFFF
SIGNED_MIN = -SIGNED_MAX - 1
UNSIGNED_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _base_in(type_id: int, candidates: Iterable[int]) -> int | None:
    """Walk the ancestors of `type_id` and return the first one among `candidates`."""
    wanted = set(candidates)
    t = type_id
    while True:
        if t in wanted:
            return t
        t = REGISTRY[t].ancestor_id
        if t == TypeId.NULL:
            return None


@dataclass(frozen=True, eq=False)
class Value:
    """Base of all values; each subclass carries the id of its type."""

    type_id: ClassVar[int] = TypeId.NULL

    @property
    def type_name(self) -> str:
        """Name of the value's type."""
        return REGISTRY.type_name(self.type_id)

    def to_string(self) -> str:
        """Return the value as a string."""
        raise UwError(StatusCode.NOT_IMPLEMENTED, f"{self.type_name} has no string form")

    def _detail(self) -> str | None:
        return None

    def describe(self) -> str:
        """Return a one-line dump of the value."""
        detail = self._detail()
        return self.type_name if detail is None else f"{self.type_name}: {detail}"

    def _equal_sametype(self, other: Value) -> bool:
        raise NotImplementedError

    def _equal(self, other: Value) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        try:
            return equal(self, other)
        except TypeError:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.type_id)


@dataclass(frozen=True, eq=False)
class Null(Value):
    """The null value."""

    type_id: ClassVar[int] = TypeId.NULL

    def to_string(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False

    def _equal_sametype(self, other: Value) -> bool:
        return True

    def _equal(self, other: Value) -> bool:
        base = _base_in(other.type_id, (TypeId.NULL, TypeId.PTR, TypeId.CHARPTR))
        if base == TypeId.NULL:
            return True
        if base in (TypeId.PTR, TypeId.CHARPTR):
            return getattr(other, "ptr", None) is None
        return False

    def __hash__(self) -> int:
        return hash(TypeId.NULL)


@dataclass(frozen=True, eq=False)
class Bool(Value):
    """A boolean value."""

    value: bool = False
    type_id: ClassVar[int] = TypeId.BOOL

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))

    def to_string(self) -> str:
        return "true" if self.value else "false"

    def _detail(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        return self.value

    def _equal_sametype(self, other: Value) -> bool:
        return self.value == other.value  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        if _base_in(other.type_id, (TypeId.BOOL,)) is None:
            return False
        return self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((TypeId.BOOL, self.value))


_NUMERIC = (TypeId.SIGNED, TypeId.UNSIGNED, TypeId.FLOAT)


@dataclass(frozen=True, eq=False)
class Signed(Value):
    """A signed 64-bit integer."""

    value: int = 0
    type_id: ClassVar[int] = TypeId.SIGNED

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"integer expected, got {type(self.value).__name__}")
        if not SIGNED_MIN <= self.value <= SIGNED_MAX:
            raise OverflowError(f"{self.value} does not fit a signed 64-bit integer")

    def _detail(self) -> str:
        return str(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def _equal_sametype(self, other: Value) -> bool:
        return self.value == other.value  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        base = _base_in(other.type_id, _NUMERIC)
        other_value = getattr(other, "value", None)
        if base == TypeId.SIGNED:
            return self.value == other_value
        if base == TypeId.UNSIGNED:
            return self.value >= 0 and self.value == other_value
        if base == TypeId.FLOAT:
            return float(self.value) == other_value
        return False

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, eq=False)
class Unsigned(Value):
    """An unsigned 64-bit integer."""

    value: int = 0
    type_id: ClassVar[int] = TypeId.UNSIGNED

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"integer expected, got {type(self.value).__name__}")
        if not 0 <= self.value <= UNSIGNED_MAX:
            raise OverflowError(f"{self.value} does not fit an unsigned 64-bit integer")

    def _detail(self) -> str:
        return str(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def _equal_sametype(self, other: Value) -> bool:
        return self.value == other.value  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        base = _base_in(other.type_id, _NUMERIC)
        other_value = getattr(other, "value", None)
        if base == TypeId.SIGNED:
            return other_value >= 0 and self.value == other_value  # type: ignore[operator]
        if base == TypeId.UNSIGNED:
            return self.value == other_value
        if base == TypeId.FLOAT:
            return float(self.value) == other_value
        return False

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, eq=False)
class Float(Value):
    """A double-precision floating point number."""

    value: float = 0.0
    type_id: ClassVar[int] = TypeId.FLOAT

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"number expected, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def _detail(self) -> str:
        return f"{self.value:f}"

    def __bool__(self) -> bool:
        return self.value != 0.0

    def _equal_sametype(self, other: Value) -> bool:
        return self.value == other.value  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        if _base_in(other.type_id, _NUMERIC) is None:
            return False
        return self.value == float(other.value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True, eq=False)
class Ptr(Value):
    """An opaque reference to any object; None stands for the null pointer."""

    ptr: Any = None
    type_id: ClassVar[int] = TypeId.PTR

    def _detail(self) -> str:
        return "(nil)" if self.ptr is None else hex(id(self.ptr))

    def __bool__(self) -> bool:
        return self.ptr is not None

    def _equal_sametype(self, other: Value) -> bool:
        return self.ptr is other.ptr  # type: ignore[attr-defined]

    def _equal(self, other: Value) -> bool:
        base = _base_in(other.type_id, (TypeId.NULL, TypeId.PTR))
        if base == TypeId.NULL:
            return self.ptr is None
        if base == TypeId.PTR:
            return self.ptr is getattr(other, "ptr", None)
        return False

    def __hash__(self) -> int:
        return hash((TypeId.PTR, id(self.ptr)))


def _coerce(b: Any) -> Value:
    if isinstance(b, Value):
        return b
    if isinstance(b, bool):
        return Bool(b)
    if isinstance(b, int):
        return Signed(b) if b <= SIGNED_MAX else Unsigned(b)
    if isinstance(b, float):
        return Float(b)
    raise TypeError(f"cannot compare a value with {type(b).__name__}")


def equal(a: Value, b: Any) -> bool:
    """Compare `a` with a value or a plain Python scalar for equality.

    Comparing with None is true only for Null itself.
    """
    if not isinstance(a, Value):
        raise TypeError(f"value expected, got {type(a).__name__}")
    if b is None:
        return REGISTRY.is_subtype(a.type_id, TypeId.NULL)
    other = _coerce(b)
    if a is other:
        return True
    if a.type_id == other.type_id:
        return a._equal_sametype(other)
    return a._equal(other)