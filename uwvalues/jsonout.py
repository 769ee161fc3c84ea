"""Serialization of values to JSON text."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .status import StatusCode, UwError
from .values import SIGNED_MIN, UNSIGNED_MAX, Bool, Float, Null, Signed, Unsigned

__all__ = ["escape_string", "to_json"]

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(c: str) -> str:
    short = _SHORT_ESCAPES.get(c)
    if short is not None:
        return short
    if ord(c) < 32:
        return f"\\u{ord(c):04x}"
    return c


def escape_string(text: str) -> str:
    """Escape double quotes, backslashes and control characters for JSON.

    Other characters, including non-ASCII ones, are left as they are.
    """
    if not isinstance(text, str):
        raise UwError(
            StatusCode.INCOMPATIBLE_TYPE, f"string expected, got {type(text).__name__}"
        )
    return "".join(_escape_char(c) for c in text)


def _incompatible(value: Any) -> UwError:
    return UwError(
        StatusCode.INCOMPATIBLE_TYPE,
        f"{type(value).__name__} cannot be converted to JSON",
    )


def _scalar(value: Any) -> str | None:
    """Return the JSON text of a scalar, or None if `value` is not one."""
    if value is None or isinstance(value, Null):
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Bool):
        return value.to_string()
    if isinstance(value, int):
        if not SIGNED_MIN <= value <= UNSIGNED_MAX:
            raise UwError(
                StatusCode.INCOMPATIBLE_TYPE, f"integer out of 64-bit range: {value}"
            )
        return str(value)
    if isinstance(value, (Signed, Unsigned)):
        return str(value.value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, Float):
        return f"{value.value:f}"
    if isinstance(value, str):
        return f'"{escape_string(value)}"'
    return None


class _Writer:
    def __init__(self, indent: int) -> None:
        self.indent = indent
        self._active: set[int] = set()

    def emit(self, value: Any, depth: int) -> Iterator[str]:
        scalar = _scalar(value)
        if scalar is not None:
            yield scalar
            return
        if isinstance(value, Mapping):
            items = list(value.items())
            for key, _ in items:
                if not isinstance(key, str):
                    raise UwError(
                        StatusCode.INCOMPATIBLE_TYPE,
                        f"map key must be a string, got {type(key).__name__}",
                    )
            yield from self._container(value, items, "{", "}", depth, self._map_item)
        elif isinstance(value, (list, tuple)):
            yield from self._container(value, list(value), "[", "]", depth, self._array_item)
        else:
            raise _incompatible(value)

    def _array_item(self, item: Any, depth: int) -> Iterator[str]:
        yield from self.emit(item, depth)

    def _map_item(self, item: tuple[str, Any], depth: int) -> Iterator[str]:
        key, val = item
        yield f'"{escape_string(key)}":'
        if self.indent:
            yield " "
        yield from self.emit(val, depth)

    def _container(self, container, items, opening, closing, depth, emit_item):
        marker = id(container)
        if marker in self._active:
            raise ValueError("circular reference detected")
        self._active.add(marker)
        try:
            yield opening
            multiline = bool(self.indent) and len(items) > 1
            line_break = "\n" + " " * (self.indent * depth)
            for position, item in enumerate(items):
                if position:
                    yield ","
                if multiline:
                    yield line_break
                yield from emit_item(item, depth + multiline)
            if multiline:
                yield "\n" + " " * (self.indent * (depth - 1))
            yield closing
        finally:
            self._active.discard(marker)


def to_json(value: Any, indent: int = 0) -> str:
    """Convert `value` to JSON text.

    Accepts None, booleans, integers, floats, strings, lists, tuples and
    mappings with string keys, as well as Null, Bool, Signed, Unsigned and
    Float values. If `indent` is nonzero, containers with more than one item
    are spread over several lines, indented by `indent` spaces per level.
    Raises UwError with INCOMPATIBLE_TYPE for anything else.
    """
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ValueError(f"indent must be a non-negative integer: {indent!r}")
    return "".join(_Writer(indent).emit(value, 1))