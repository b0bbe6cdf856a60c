"""Typed accessors for navigating a parsed tree."""

from __future__ import annotations

from .errors import AccessError, WrongKindError
from .table import Table
from .values import Value, VBool, VNumber, VString, VTable


def as_table(value: Value) -> Table:
    if isinstance(value, VTable):
        return value.table
    raise WrongKindError("table", value.kind)


def as_string(value: Value) -> str:
    if isinstance(value, VString):
        return value.value
    raise WrongKindError("string", value.kind)


def as_number(value: Value) -> float:
    if isinstance(value, VNumber):
        return value.value
    raise WrongKindError("number", value.kind)


def as_bool(value: Value) -> bool:
    if isinstance(value, VBool):
        return value.value
    raise WrongKindError("bool", value.kind)


def get(value: Value, name: str) -> Value:
    """Return the value of the first entry named *name* in a table value.

    Raises WrongKindError if *value* is not a table, MissingKeyError if no
    entry carries that name.
    """
    return as_table(value).get(name)


def resolve_path(value: Value, path: str) -> Value:
    """Walk a dotted *path* from *value*.

    - Name segments look up the first entry with that key
    - Numeric segments select the n-th entry (1-based), named or not
    """
    current = value
    for segment in path.split("."):
        if segment.isascii() and segment.isdigit():
            table = as_table(current)
            idx = int(segment) - 1
            if not 0 <= idx < len(table):
                raise AccessError(f"index {segment} out of range for table of {len(table)}")
            current = table[idx].value
        else:
            current = get(current, segment)
    return current
