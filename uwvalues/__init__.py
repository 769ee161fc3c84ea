"""Dynamically typed scalar values with a type registry, status codes, timestamps and JSON output."""

__version__ = "0.1.0"
__all__ = ["status", "typesys", "values", "temporal", "jsonout"]