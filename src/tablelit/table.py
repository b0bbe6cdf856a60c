"""Table and Entry: the ordered container built by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import MissingKeyError
from .values import Value


@dataclass(frozen=True, slots=True)
class Entry:
    key: str | None  # None = anonymous (array-like element)
    value: Value


@dataclass(frozen=True, slots=True)
class Table:
    """Ordered sequence of named or anonymous entries, in source order.

    Names need not be unique; lookups by name resolve to the first match.
    """

    entries: tuple[Entry, ...] = ()

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        object.__setattr__(self, "entries", tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    # -- Lookup ---------------------------------------------------------

    def get(self, name: str) -> Value:
        """Return the value of the first entry named *name*."""
        for entry in self.entries:
            if entry.key == name:
                return entry.value
        raise MissingKeyError(name)

    def get_all(self, name: str) -> list[Value]:
        """Return the values of every entry named *name*."""
        return [e.value for e in self.entries if e.key == name]

    def keys(self) -> list[str]:
        return [e.key for e in self.entries if e.key is not None]

    def values(self) -> list[Value]:
        return [e.value for e in self.entries]

    def anonymous(self) -> list[Value]:
        """Values of the positional (unnamed) entries."""
        return [e.value for e in self.entries if e.key is None]
