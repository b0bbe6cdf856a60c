"""Reader layer: lexical primitives of the table literal language.

Every reader takes the full input and a start offset and returns the parsed
item together with the offset just past it, or raises GrammarError.
"""

from __future__ import annotations

import re

from .errors import GrammarError
from .values import Value, VBool, VNumber, VString


_WS_RE = re.compile(r"[ \t\r\n]*")
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")
_BOOL_RE = re.compile(r"(true|false)(?![A-Za-z0-9_])")
_PLAIN_KEY_RE = re.compile(r"[A-Za-z_]+")


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------

def skip_ws(text: str, pos: int) -> int:
    return _WS_RE.match(text, pos).end()


def expect_char(text: str, pos: int, ch: str) -> int:
    """Consume the single character *ch* at *pos*."""
    if not text.startswith(ch, pos):
        found = repr(text[pos]) if pos < len(text) else "end of input"
        raise GrammarError(f"expected {ch!r} but found {found}", text, pos)
    return pos + 1


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

def read_number(text: str, pos: int) -> tuple[VNumber, int]:
    """``-?digits(.digits)?`` → VNumber.  No exponent, no leading ``+`` or ``.``."""
    m = _NUMBER_RE.match(text, pos)
    if m is None:
        raise GrammarError("malformed number", text, pos)
    return VNumber(float(m.group())), m.end()


def read_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read a double-quoted string and resolve its escapes.

    ``\\"`` is the only escape.  A raw newline or a missing closing quote is
    an error.
    """
    start = pos
    pos = expect_char(text, pos, '"')
    chars: list[str] = []
    while True:
        if pos >= len(text):
            raise GrammarError("unterminated string", text, start)
        ch = text[pos]
        if ch == '"':
            return "".join(chars), pos + 1
        if ch == "\n":
            raise GrammarError("newline in string", text, pos)
        if ch == "\\":
            esc = text[pos + 1] if pos + 1 < len(text) else ""
            if esc != '"':
                raise GrammarError(f"invalid escape sequence \\{esc}", text, pos)
            chars.append('"')
            pos += 2
            continue
        chars.append(ch)
        pos += 1


def read_string(text: str, pos: int) -> tuple[VString, int]:
    value, pos = read_quoted(text, pos)
    return VString(value), pos


def read_bool(text: str, pos: int) -> tuple[VBool, int]:
    """``true`` / ``false`` as whole words (``truefoo`` is not a boolean)."""
    m = _BOOL_RE.match(text, pos)
    if m is None:
        raise GrammarError("expected true or false", text, pos)
    return VBool(m.group(1) == "true"), m.end()


def read_atom(text: str, pos: int) -> tuple[Value, int]:
    """Dispatch on the first character to the number, string or bool reader."""
    ch = text[pos] if pos < len(text) else ""
    if ch == "-" or ch.isascii() and ch.isdigit():
        return read_number(text, pos)
    if ch == '"':
        return read_string(text, pos)
    if ch in ("t", "f"):
        return read_bool(text, pos)
    raise GrammarError("expected a value", text, pos)


# ---------------------------------------------------------------------------
# Key names
# ---------------------------------------------------------------------------

def is_plain_key_start(ch: str) -> bool:
    return ch == "_" or ch.isascii() and ch.isalpha()


def read_plain_key(text: str, pos: int) -> tuple[str, int]:
    """ASCII letters and underscores, no digits."""
    m = _PLAIN_KEY_RE.match(text, pos)
    if m is None:
        raise GrammarError("expected a key name", text, pos)
    return m.group(), m.end()


def read_bracketed_key(text: str, pos: int) -> tuple[str, int]:
    """``["any text"]``: a quoted string inside square brackets."""
    pos = expect_char(text, pos, "[")
    key, pos = read_quoted(text, pos)
    pos = expect_char(text, pos, "]")
    return key, pos


def read_key(text: str, pos: int) -> tuple[str, int]:
    if text.startswith("[", pos):
        return read_bracketed_key(text, pos)
    return read_plain_key(text, pos)
