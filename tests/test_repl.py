"""Tests for TableRepl."""

import pytest

from tablelit import TableRepl, GrammarError, MissingKeyError, TablelitError, VNumber, VString


def test_eval_returns_table():
    repl = TableRepl()
    t = repl.eval("{a = 1}")
    assert t.get("a") == VNumber(1.0)
    assert repl.last is t

def test_eval_replaces_last():
    repl = TableRepl()
    repl.eval("{a = 1}")
    repl.eval("{b = 2}")
    assert repl.last.keys() == ["b"]

def test_failed_eval_keeps_previous():
    repl = TableRepl()
    repl.eval("{a = 1}")
    with pytest.raises(GrammarError):
        repl.eval("{a = ")
    assert repl.last.keys() == ["a"]

def test_query():
    repl = TableRepl()
    repl.eval('{user = {name = "Ann", tags = {"x", "y"}}}')
    assert repl.query("user.name") == VString("Ann")
    assert repl.query("user.tags.2") == VString("y")

def test_query_missing():
    repl = TableRepl()
    repl.eval("{a = 1}")
    with pytest.raises(MissingKeyError):
        repl.query("b")

def test_query_without_table():
    with pytest.raises(TablelitError):
        TableRepl().query("a")

def test_reset():
    repl = TableRepl()
    repl.eval("{a = 1}")
    repl.reset()
    assert repl.last is None
