import io

import pytest

from uwvalues.status import StatusCode, UwError
from uwvalues.typesys import REGISTRY, TypeId
from uwvalues.values import (
    SIGNED_MAX,
    UNSIGNED_MAX,
    Bool,
    Float,
    Null,
    Ptr,
    Signed,
    Unsigned,
    equal,
)


def test_to_string_fixed_literals():
    assert Null().to_string() == "null"
    assert Bool(True).to_string() == "true"
    assert Bool(False).to_string() == "false"


@pytest.mark.parametrize("value", [Signed(1), Unsigned(1), Float(1.0), Ptr(None)])
def test_to_string_not_implemented(value):
    with pytest.raises(UwError) as info:
        value.to_string()
    assert info.value.code == StatusCode.NOT_IMPLEMENTED


def test_describe_contains_type_name_and_value():
    assert Null().describe() == "Null"
    assert Bool(True).describe() == "Bool: true"
    assert Signed(-5).describe() == "Signed: -5"
    assert Unsigned(UNSIGNED_MAX).describe() == f"Unsigned: {UNSIGNED_MAX}"
    assert Float(1.5).describe() == "Float: 1.500000"
    assert Ptr(None).describe() == "Ptr: (nil)"


def test_truthiness():
    assert not Null()
    assert not Bool(False) and Bool(True)
    assert not Signed(0) and Signed(-1)
    assert not Unsigned(0) and Unsigned(2)
    assert not Float(0.0) and Float(0.5)
    assert not Ptr(None) and Ptr(object())


def test_signed_unsigned_cross_equality():
    assert equal(Signed(5), Unsigned(5))
    assert equal(Unsigned(5), Signed(5))
    assert not equal(Signed(-1), Unsigned(UNSIGNED_MAX))
    assert not equal(Unsigned(UNSIGNED_MAX), Signed(-1))


def test_int_float_equality():
    assert equal(Signed(3), Float(3.0))
    assert equal(Float(3.0), Unsigned(3))
    assert not equal(Float(3.5), Signed(3))


def test_bool_not_equal_to_int():
    assert not equal(Bool(True), Signed(1))
    assert not equal(Signed(1), Bool(True))
    assert equal(Bool(True), Bool(True))


def test_null_and_ptr_equality():
    assert equal(Null(), Null())
    assert equal(Null(), Ptr(None))
    assert equal(Ptr(None), Null())
    obj = object()
    assert not equal(Null(), Ptr(obj))
    assert equal(Ptr(obj), Ptr(obj))
    assert not equal(Ptr(obj), Ptr(object()))


def test_equal_with_none_only_for_null():
    assert equal(Null(), None)
    assert not equal(Ptr(None), None)
    assert not equal(Signed(0), None)


def test_equal_with_python_scalars():
    assert equal(Signed(7), 7)
    assert equal(Unsigned(UNSIGNED_MAX), UNSIGNED_MAX)
    assert equal(Float(2.5), 2.5)
    assert equal(Bool(False), False)
    assert not equal(Signed(7), True)


def test_eq_operator_and_hash_consistency():
    assert Signed(10) == Unsigned(10)
    assert hash(Signed(10)) == hash(Unsigned(10))
    assert Float(2.0) == Signed(2)
    assert hash(Float(2.0)) == hash(Signed(2))
    assert len({Signed(4), Unsigned(4), Float(4.0)}) == 1


def test_range_checks():
    with pytest.raises(OverflowError):
        Signed(SIGNED_MAX + 1)
    with pytest.raises(OverflowError):
        Unsigned(-1)
    with pytest.raises(OverflowError):
        Unsigned(UNSIGNED_MAX + 1)
    with pytest.raises(TypeError):
        Signed(1.5)
    with pytest.raises(TypeError):
        Float("x")


def test_incomparable_type_raises():
    with pytest.raises(TypeError):
        equal(Signed(1), "1")
    with pytest.raises(TypeError):
        equal(1, Signed(1))


def test_type_names_match_registry():
    assert Signed(1).type_name == REGISTRY.type_name(TypeId.SIGNED)
    assert Ptr().type_name == "Ptr"


def test_subtype_compares_through_ancestor():
    sub_id = REGISTRY.subtype("TestSigned", TypeId.SIGNED)

    class TestSigned(Signed):
        type_id = sub_id

    assert equal(Signed(9), TestSigned(9))
    assert equal(TestSigned(9), Unsigned(9))
    assert not equal(TestSigned(9), Signed(8))
    assert TestSigned(9).describe() == "TestSigned: 9"
    out = io.StringIO()
    REGISTRY.dump_types(out)
    assert "TestSigned" in out.getvalue()


def test_values_are_immutable():
    v = Signed(1)
    with pytest.raises(AttributeError):
        v.value = 2
    assert v.value == 1