"""tablelit: parser for brace-delimited table literals."""

from .errors import (
    AccessError,
    GrammarError,
    MissingKeyError,
    TablelitError,
    WrongKindError,
)
from .getter import as_bool, as_number, as_string, as_table, get, resolve_path
from .parser import parse
from .repl import TableRepl
from .table import Entry, Table
from .values import Value, VBool, VNumber, VString, VTable

__all__ = [
    "parse",
    "Table",
    "Entry",
    "Value",
    "VTable",
    "VString",
    "VNumber",
    "VBool",
    "as_table",
    "as_string",
    "as_number",
    "as_bool",
    "get",
    "resolve_path",
    "TablelitError",
    "GrammarError",
    "AccessError",
    "WrongKindError",
    "MissingKeyError",
    "TableRepl",
]
