import io

import pytest

from uwvalues.typesys import LINE_READER, TypeId, TypeRegistry


@pytest.fixture
def reg():
    return TypeRegistry()


def test_builtin_names(reg):
    assert reg.type_name(TypeId.NULL) == "Null"
    assert reg.type_name(TypeId.SIGNED) == "Signed"
    assert reg.type_name(TypeId.MAP) == "Map"
    assert len(reg) == len(TypeId)


def test_builtin_subtypes(reg):
    assert reg.is_subtype(TypeId.SIGNED, TypeId.INT)
    assert reg.is_subtype(TypeId.UNSIGNED, TypeId.INT)
    assert reg.is_subtype(TypeId.INT, TypeId.INT)
    assert not reg.is_subtype(TypeId.FLOAT, TypeId.INT)
    assert not reg.is_subtype(TypeId.BOOL, TypeId.NULL)
    assert reg.is_subtype(TypeId.NULL, TypeId.NULL)


def test_unknown_type(reg):
    with pytest.raises(ValueError):
        reg.type_name(len(TypeId) + 5)


def test_add_type_appends(reg):
    tid = reg.add_type("Thing")
    assert tid == len(TypeId)
    assert reg.type_name(tid) == "Thing"
    assert reg[tid].ancestor_id == TypeId.NULL
    assert reg.add_type("Other") == tid + 1


def test_subtype_chain(reg):
    base = reg.subtype("MySigned", TypeId.SIGNED)
    derived = reg.subtype("Deeper", base)
    assert reg.is_subtype(derived, TypeId.INT)
    assert reg.is_subtype(derived, base)
    assert not reg.is_subtype(base, derived)


def test_subtype_of_null_rejected(reg):
    with pytest.raises(ValueError):
        reg.subtype("Bad", TypeId.NULL)


def test_interface_registration(reg):
    assert reg.interface_name(LINE_READER) == "LineReader"
    iid = reg.register_interface("Reader")
    assert reg.interface_name(iid) == "Reader"
    with pytest.raises(ValueError):
        reg.interface_name(iid + 1)


def test_interface_inheritance_and_override(reg):
    iid = reg.register_interface("Greeter")
    base = reg.add_type("Base", {iid: {"hello": lambda: "base", "bye": lambda: "base-bye"}})
    child = reg.subtype("Child", base, {iid: {"hello": lambda: "child", "bye": None}})
    assert reg.has_interface(child, iid)
    iface = reg.get_interface(child, iid)
    assert iface.hello() == "child"
    assert iface.bye() == "base-bye"
    assert reg.get_interface(base, iid).hello() == "base"


def test_missing_interface(reg):
    assert not reg.has_interface(TypeId.BOOL, LINE_READER)
    with pytest.raises(KeyError):
        reg.get_interface(TypeId.BOOL, LINE_READER)


def test_unregistered_interface_rejected(reg):
    with pytest.raises(ValueError):
        reg.add_type("X", {99: {"m": lambda: None}})


def test_registries_are_independent(reg):
    other = TypeRegistry()
    reg.add_type("OnlyHere")
    assert len(other) == len(TypeId)
    assert len(reg) == len(TypeId) + 1


def test_dump_types(reg):
    iid = reg.register_interface("Greeter")
    tid = reg.add_type("Thing", {iid: {"hello": lambda: None}})
    buf = io.StringIO()
    reg.dump_types(buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "=== UW types ==="
    assert "3: Signed; ancestor=2 (Int)" in lines
    assert f"{tid}: Thing; ancestor=0 (Null)" in lines
    assert f"    interface {iid} (Greeter):" in lines
    assert "        hello " in lines