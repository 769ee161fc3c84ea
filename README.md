# uwvalues

A small library of dynamically typed scalar values. It has a type registry
that can be extended, numbered status codes raised as exceptions, date/time
and timestamp values, and a JSON serializer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `uwvalues.status`

- `StatusCode` is an `IntEnum` of the built-in codes, from `SUCCESS` (0)
  to `UNREAD_FAILED` (14).
- `define_status(name)` registers a new status name and returns its code.
  If the name is already registered, it returns the existing code.
  Codes are limited to `MAX_STATUS_CODE` (0x7FFF).
- `status_str(code)` returns the name of a code. It raises `ValueError`
  for an unknown code.
- `UwError(code, description=None, *, errno=0, file_name=None, line_number=0)`
  is the exception the library raises. It has the attributes `code`,
  `name`, `description`, `errno`, `file_name` and `line_number`, and the
  property `is_eof`. `SUCCESS` cannot be used as an error code.

### `uwvalues.typesys`

- `TypeId` is an `IntEnum` of the built-in type ids: `NULL`, `BOOL`, `INT`,
  `SIGNED`, `UNSIGNED`, `FLOAT`, `DATETIME`, `TIMESTAMP`, `PTR`, `CHARPTR`,
  `STRING`, `STRUCT`, `COMPOUND`, `STATUS`, `ITERATOR`, `ARRAY` and `MAP`.
  `SIGNED` and `UNSIGNED` derive from `INT`.
- `UwType` is a record that holds a type's `id`, `name`, `ancestor_id`
  and `interfaces`.
- `TypeRegistry` holds the types and the interface names. `REGISTRY` is
  the shared instance. Its methods:
  - `add_type(name, interfaces=None)` adds a type that has no ancestor.
  - `subtype(name, ancestor_id, interfaces=None)` derives a type from an
    ancestor. The subtype inherits the ancestor's interface methods and
    overrides any that are given and are not `None`.
  - `is_subtype(type_id, ancestor_id)` and `type_name(type_id)` report on
    a type.
  - `register_interface(name)` and `interface_name(interface_id)` manage
    interfaces. `LINE_READER` (0) is registered from the start.
  - `has_interface(type_id, interface_id)` reports whether a type has an
    interface. `get_interface(type_id, interface_id)` returns the
    interface's methods as attributes, or raises `KeyError`.
  - `dump_types(fp)` writes a listing of all types and their interfaces
    to a text stream.

### `uwvalues.values`

- `Value` is the base class of all values. Its subclasses are `Null`,
  `Bool`, `Signed` (signed 64-bit), `Unsigned` (unsigned 64-bit), `Float`
  and `Ptr` (wraps any object; `None` is the null pointer). Values are
  frozen dataclasses. An integer outside its range raises
  `OverflowError`, and a value of the wrong type raises `TypeError`.
- `to_string()` returns `"null"`, `"true"` or `"false"` for `Null` and
  `Bool`. For the other types it raises `UwError` with `NOT_IMPLEMENTED`.
- `describe()` returns a one-line dump, such as `"Signed: 5"`,
  `"Float: 1.500000"` or `"Null"`.
- `equal(a, b)` compares a value with another value or with a plain
  Python scalar. Signed, unsigned and float values compare by number, but
  a negative signed value never equals an unsigned one. `Null` equals a
  null `Ptr`, and `None` equals only `Null`. The `==` operator uses
  `equal`.
- `SIGNED_MIN`, `SIGNED_MAX` and `UNSIGNED_MAX` give the integer limits.

### `uwvalues.temporal`

- `DateTime(year, month, day, hour, minute, second, nanosecond, gmt_offset, tzindex)`
  holds a date and time. `gmt_offset` is in minutes. `describe()` gives,
  for example, `"DateTime: 2024-01-02 03:04:05.000000006+02:00"`.
  `to_string()` raises `UwError` with `NOT_IMPLEMENTED`.
- `Timestamp(seconds, nanoseconds)`: `to_string()` returns
  `"<seconds>.<9-digit nanoseconds>"`.
- `monotonic()` returns the monotonic clock as a `Timestamp`.
- `timestamp_sum(a, b)` returns a + b and `timestamp_diff(a, b)` returns
  a - b. A negative result raises `OverflowError`. An argument that is not
  a `Timestamp` raises `UwError` with `INCOMPATIBLE_TYPE`.

### `uwvalues.jsonout`

- `to_json(value, indent=0)` accepts the following and returns JSON text:
  - `None`, `bool`, `int` (64-bit range), `float` and `str`
  - lists, tuples, and mappings with string keys
  - `Null`, `Bool`, `Signed`, `Unsigned` and `Float` values

  Floats are written with six decimals. When `indent` is nonzero, a
  container with more than one item is spread over several lines. Any
  other input raises `UwError` with `INCOMPATIBLE_TYPE`. A circular
  reference raises `ValueError`.
- `escape_string(text)` escapes double quotes, backslashes and control
  characters. Non-ASCII characters are left as they are.

## Example

```python
from uwvalues.values import Signed, Unsigned, equal
from uwvalues.jsonout import to_json

assert equal(Signed(5), Unsigned(5))
print(to_json({"name": "demo", "items": [1, 2, None]}, 2))
```

## Limitations

- The registry has type ids for strings, arrays, maps, iterators and
  statuses, but the package provides no value classes for them.
  Collections in JSON output are plain Python lists, tuples and mappings.
- JSON is only written, never parsed.
- There is no command-line program.