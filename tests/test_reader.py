"""Tests for the Reader layer (lexical primitives)."""

import pytest

from tablelit.errors import GrammarError
from tablelit.reader import (
    read_atom,
    read_bool,
    read_bracketed_key,
    read_key,
    read_number,
    read_plain_key,
    read_string,
    skip_ws,
)
from tablelit.values import VBool, VNumber, VString


# ---------------------------------------------------------------------------
# skip_ws
# ---------------------------------------------------------------------------

def test_skip_ws_mixed():
    assert skip_ws(" \t\n\r x", 0) == 5

def test_skip_ws_none():
    assert skip_ws("x", 0) == 0

def test_skip_ws_at_end():
    assert skip_ws("ab", 2) == 2


# ---------------------------------------------------------------------------
# read_number
# ---------------------------------------------------------------------------

def test_number_integer():
    assert read_number("5", 0) == (VNumber(5.0), 1)

def test_number_fraction():
    assert read_number("5.5}", 0) == (VNumber(5.5), 3)

def test_number_negative():
    assert read_number("-12.25", 0) == (VNumber(-12.25), 6)

def test_number_stops_before_bare_dot():
    # "5." is not a fraction; the dot is left for the grammar to reject
    assert read_number("5.", 0) == (VNumber(5.0), 1)

def test_number_no_exponent():
    assert read_number("1e5", 0) == (VNumber(1.0), 1)

def test_number_rejects_lone_minus():
    with pytest.raises(GrammarError):
        read_number("-x", 0)

def test_number_rejects_leading_dot():
    with pytest.raises(GrammarError):
        read_number(".5", 0)


# ---------------------------------------------------------------------------
# read_string
# ---------------------------------------------------------------------------

def test_string_plain():
    assert read_string('"hello"', 0) == (VString("hello"), 7)

def test_string_escaped_quote():
    value, pos = read_string('"he\\"llo"', 0)
    assert value == VString('he"llo')
    assert pos == 9

def test_string_empty():
    assert read_string('""', 0) == (VString(""), 2)

def test_string_unicode():
    assert read_string('"héllo ✓"', 0)[0] == VString("héllo ✓")

def test_string_unterminated():
    with pytest.raises(GrammarError) as ei:
        read_string('"abc', 0)
    assert "unterminated string" in str(ei.value)

def test_string_raw_newline():
    with pytest.raises(GrammarError) as ei:
        read_string('"ab\ncd"', 0)
    assert "newline" in str(ei.value)

def test_string_invalid_escape():
    with pytest.raises(GrammarError) as ei:
        read_string('"a\\nb"', 0)
    assert "invalid escape sequence \\n" in str(ei.value)

def test_string_backslash_at_end():
    with pytest.raises(GrammarError):
        read_string('"a\\', 0)


# ---------------------------------------------------------------------------
# read_bool
# ---------------------------------------------------------------------------

def test_bool_true():
    assert read_bool("true", 0) == (VBool(True), 4)

def test_bool_false():
    assert read_bool("false}", 0) == (VBool(False), 5)

def test_bool_whole_word_only():
    with pytest.raises(GrammarError):
        read_bool("truefoo", 0)


# ---------------------------------------------------------------------------
# read_atom
# ---------------------------------------------------------------------------

def test_atom_dispatch():
    assert read_atom("7", 0)[0] == VNumber(7.0)
    assert read_atom('"s"', 0)[0] == VString("s")
    assert read_atom("false", 0)[0] == VBool(False)

def test_atom_rejects_plus():
    with pytest.raises(GrammarError):
        read_atom("+5", 0)

def test_atom_at_end_of_input():
    with pytest.raises(GrammarError) as ei:
        read_atom("{a=", 3)
    assert ei.value.remainder == ""


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

def test_plain_key_underscore():
    assert read_plain_key("a_b=5", 0) == ("a_b", 3)

def test_plain_key_stops_at_digit():
    assert read_plain_key("ab1", 0) == ("ab", 2)

def test_plain_key_rejects_digit_start():
    with pytest.raises(GrammarError):
        read_plain_key("1a", 0)

def test_bracketed_key():
    assert read_bracketed_key('["a b"]', 0) == ("a b", 7)

def test_bracketed_key_escaped_quote():
    assert read_bracketed_key('["x\\"y"]', 0) == ('x"y', 8)

def test_bracketed_key_missing_close():
    with pytest.raises(GrammarError):
        read_bracketed_key('["a"', 0)

def test_read_key_dispatch():
    assert read_key('["1"]', 0) == ("1", 5)
    assert read_key("name", 0) == ("name", 4)
