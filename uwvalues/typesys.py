"""Type registry: built-in type ids, subtypes and interfaces."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import SimpleNamespace
from typing import Any, TextIO

__all__ = ["TypeId", "UwType", "TypeRegistry", "LINE_READER", "MAX_TYPES", "REGISTRY"]

# Type ids occupy 16 bits.
MAX_TYPES = 0xFFFF

# Id of the built-in LineReader interface.
LINE_READER = 0

InterfaceMethods = Mapping[str, "Callable[..., Any] | None"]


class TypeId(IntEnum):
    """Ids of the built-in types."""

    NULL = 0
    BOOL = 1
    INT = 2
    SIGNED = 3
    UNSIGNED = 4
    FLOAT = 5
    DATETIME = 6
    TIMESTAMP = 7
    PTR = 8
    CHARPTR = 9
    STRING = 10
    STRUCT = 11
    COMPOUND = 12
    STATUS = 13
    ITERATOR = 14
    ARRAY = 15
    MAP = 16


_BUILTIN_NAMES = {
    TypeId.NULL: "Null",
    TypeId.BOOL: "Bool",
    TypeId.INT: "Int",
    TypeId.SIGNED: "Signed",
    TypeId.UNSIGNED: "Unsigned",
    TypeId.FLOAT: "Float",
    TypeId.DATETIME: "DateTime",
    TypeId.TIMESTAMP: "Timestamp",
    TypeId.PTR: "Ptr",
    TypeId.CHARPTR: "CharPtr",
    TypeId.STRING: "String",
    TypeId.STRUCT: "Struct",
    TypeId.COMPOUND: "Compound",
    TypeId.STATUS: "Status",
    TypeId.ITERATOR: "Iterator",
    TypeId.ARRAY: "Array",
    TypeId.MAP: "Map",
}

# Signed and unsigned integers derive from the abstract integer.
_BUILTIN_ANCESTORS = {
    TypeId.SIGNED: TypeId.INT,
    TypeId.UNSIGNED: TypeId.INT,
}


@dataclass
class UwType:
    """A registered type: its id, name, ancestor and interfaces."""

    id: int
    name: str
    ancestor_id: int = TypeId.NULL
    interfaces: dict[int, dict[str, Any]] = field(default_factory=dict)


class TypeRegistry:
    """Holds all known types and interfaces."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._types: list[UwType] = [
            UwType(int(tid), name, int(_BUILTIN_ANCESTORS.get(tid, TypeId.NULL)))
            for tid, name in _BUILTIN_NAMES.items()
        ]
        self._interface_names: list[str] = ["LineReader"]

    def __len__(self) -> int:
        return len(self._types)

    def __getitem__(self, type_id: int) -> UwType:
        return self._lookup(type_id)

    def _lookup(self, type_id: int) -> UwType:
        if isinstance(type_id, int) and 0 <= type_id < len(self._types):
            return self._types[type_id]
        raise ValueError(f"unknown type id: {type_id!r}")

    def _check_interfaces(self, interfaces: Mapping[int, InterfaceMethods] | None) -> None:
        for interface_id in interfaces or {}:
            self.interface_name(interface_id)

    def _append(self, uw_type: UwType) -> int:
        if len(self._types) >= MAX_TYPES:
            raise OverflowError(f"cannot define more types than {len(self._types)}")
        uw_type.id = len(self._types)
        self._types.append(uw_type)
        return uw_type.id

    def add_type(self, name: str, interfaces: Mapping[int, InterfaceMethods] | None = None) -> int:
        """Add a type without ancestor and return its id."""
        with self._lock:
            self._check_interfaces(interfaces)
            table = {
                iid: {k: v for k, v in methods.items() if v is not None}
                for iid, methods in (interfaces or {}).items()
            }
            return self._append(UwType(0, name, TypeId.NULL, table))

    def subtype(
        self,
        name: str,
        ancestor_id: int,
        interfaces: Mapping[int, InterfaceMethods] | None = None,
    ) -> int:
        """Derive a type from `ancestor_id` and return its id.

        Interfaces of the ancestor are inherited; methods given in
        `interfaces` override them, and None entries keep the inherited ones.
        """
        with self._lock:
            if ancestor_id == TypeId.NULL:
                raise ValueError("Null cannot be an ancestor")
            ancestor = self._lookup(ancestor_id)
            self._check_interfaces(interfaces)
            table = {iid: dict(methods) for iid, methods in ancestor.interfaces.items()}
            for iid, methods in (interfaces or {}).items():
                merged = table.setdefault(iid, {})
                merged.update({k: v for k, v in methods.items() if v is not None})
            return self._append(UwType(0, name, ancestor.id, table))

    def is_subtype(self, type_id: int, ancestor_id: int) -> bool:
        """True if `type_id` is `ancestor_id` or derives from it."""
        t = self._lookup(type_id).id
        while True:
            if t == ancestor_id:
                return True
            t = self._types[t].ancestor_id
            if t == TypeId.NULL:
                return False

    def type_name(self, type_id: int) -> str:
        """Return the name of a type."""
        return self._lookup(type_id).name

    def register_interface(self, name: str) -> int:
        """Register an interface name and return a new interface id."""
        if not isinstance(name, str) or not name:
            raise ValueError("interface name must be a non-empty string")
        with self._lock:
            self._interface_names.append(name)
            return len(self._interface_names) - 1

    def interface_name(self, interface_id: int) -> str:
        """Return the registered name of an interface."""
        if isinstance(interface_id, int) and 0 <= interface_id < len(self._interface_names):
            return self._interface_names[interface_id]
        raise ValueError(f"unknown interface id: {interface_id!r}")

    def has_interface(self, type_id: int, interface_id: int) -> bool:
        """True if the type implements the interface."""
        return interface_id in self._lookup(type_id).interfaces

    def get_interface(self, type_id: int, interface_id: int) -> SimpleNamespace:
        """Return the interface methods of a type as attributes."""
        uw_type = self._lookup(type_id)
        try:
            methods = uw_type.interfaces[interface_id]
        except KeyError:
            raise KeyError(
                f"type {uw_type.id} ({uw_type.name}) has no interface {interface_id}"
            ) from None
        return SimpleNamespace(**methods)

    def dump_types(self, fp: TextIO) -> None:
        """Write a listing of all types and their interfaces."""
        fp.write("=== UW types ===\n")
        for t in self._types:
            ancestor = self._types[t.ancestor_id]
            fp.write(f"{t.id}: {t.name}; ancestor={t.ancestor_id} ({ancestor.name})\n")
            for iid, methods in t.interfaces.items():
                fp.write(f"    interface {iid} ({self.interface_name(iid)}):\n        ")
                fp.write("".join(f"{method} " for method in methods))
                fp.write("\n")


REGISTRY = TypeRegistry()