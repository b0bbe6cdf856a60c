"""Exceptions raised by tablelit."""

from __future__ import annotations


class TablelitError(Exception):
    """Base class for all tablelit errors."""


# ---------------------------------------------------------------------------
# Grammar errors (raised by parse)
# ---------------------------------------------------------------------------

class GrammarError(TablelitError):
    """The input does not match the table grammar at some position."""

    def __init__(self, message: str, text: str = "", offset: int = 0) -> None:
        self.message = message
        self.offset = offset
        self.remainder = text[offset:]
        self.line = text.count("\n", 0, offset) + 1
        self.column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        super().__init__(
            f"{message} at {self.line}:{self.column} (remaining: {_clip(self.remainder)!r})"
        )


def _clip(s: str, limit: int = 20) -> str:
    return s if len(s) <= limit else s[:limit] + "..."


# ---------------------------------------------------------------------------
# Accessor errors (raised while navigating a parsed tree)
# ---------------------------------------------------------------------------

class AccessError(TablelitError):
    """A caller's assumption about the shape of a parsed tree was wrong."""


class WrongKindError(AccessError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} but found {actual}")


class MissingKeyError(AccessError, KeyError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"no matching key {key!r}")

    def __str__(self) -> str:
        return self.args[0]
