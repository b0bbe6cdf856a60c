"""Grammar layer: builds a Table tree from table literal text.

    value  := atom | table
    table  := '{' (entry (',' entry)* ','?)? '}'
    entry  := (key '=')? value

Whitespace is allowed between any two tokens.
"""

from __future__ import annotations

from .errors import GrammarError
from .reader import (
    expect_char,
    is_plain_key_start,
    read_atom,
    read_bracketed_key,
    read_plain_key,
    skip_ws,
)
from .table import Entry, Table
from .values import Value, VTable


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(text: str, *, max_depth: int | None = None) -> Table:
    """Parse *text*, which must hold exactly one table, and return it.

    *max_depth* bounds table nesting (the top-level table is depth 1);
    ``None`` leaves it limited only by the interpreter stack.
    """
    start = skip_ws(text, 0)
    try:
        value, pos = parse_value(text, start, max_depth=max_depth)
    except RecursionError:
        raise GrammarError("tables nested too deeply", text, start) from None

    if not isinstance(value, VTable):
        raise GrammarError(f"expected a table at top level but found {value.kind}", text, start)

    pos = skip_ws(text, pos)
    if pos < len(text):
        raise GrammarError("unexpected trailing data", text, pos)
    return value.table


# ---------------------------------------------------------------------------
# Recursive productions
# ---------------------------------------------------------------------------

def parse_value(text: str, pos: int, depth: int = 1, max_depth: int | None = None) -> tuple[Value, int]:
    """Parse one value (atom or table) starting exactly at *pos*."""
    if text.startswith("{", pos):
        table, pos = _parse_table(text, pos, depth, max_depth)
        return VTable(table), pos
    return read_atom(text, pos)


def _parse_table(text: str, pos: int, depth: int, max_depth: int | None) -> tuple[Table, int]:
    if max_depth is not None and depth > max_depth:
        raise GrammarError(f"tables nested deeper than {max_depth}", text, pos)

    pos = expect_char(text, pos, "{")
    pos = skip_ws(text, pos)
    entries: list[Entry] = []

    if text.startswith("}", pos):
        return Table(entries), pos + 1

    while True:
        entry, pos = _parse_entry(text, pos, depth, max_depth)
        entries.append(entry)
        pos = skip_ws(text, pos)

        if text.startswith(",", pos):
            pos = skip_ws(text, pos + 1)
            # A single trailing comma is dropped
            if text.startswith("}", pos):
                return Table(entries), pos + 1
            continue

        if text.startswith("}", pos):
            return Table(entries), pos + 1

        if pos >= len(text):
            raise GrammarError("unmatched '{'", text, pos)
        raise GrammarError(f"expected ',' or '}}' but found {text[pos]!r}", text, pos)


def _parse_entry(text: str, pos: int, depth: int, max_depth: int | None) -> tuple[Entry, int]:
    """Parse ``key = value`` or an anonymous ``value``.

    A plain identifier not followed by ``=`` is re-read as a value, so
    ``{true}`` holds an anonymous boolean.
    """
    ch = text[pos] if pos < len(text) else ""
    key: str | None = None

    if ch == "[":
        key, pos = read_bracketed_key(text, pos)
        pos = expect_char(text, skip_ws(text, pos), "=")
        pos = skip_ws(text, pos)
    elif is_plain_key_start(ch):
        name, after = read_plain_key(text, pos)
        after = skip_ws(text, after)
        if text.startswith("=", after):
            key = name
            pos = skip_ws(text, after + 1)

    value, pos = parse_value(text, pos, depth + 1, max_depth)
    return Entry(key, value), pos
