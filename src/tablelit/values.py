"""Value types for tablelit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from .table import Table


class _Accessors:
    """Typed accessors shared by every value class (see :mod:`.getter`)."""

    __slots__ = ()

    kind: ClassVar[str]

    def as_table(self) -> Table:
        from .getter import as_table
        return as_table(self)

    def as_string(self) -> str:
        from .getter import as_string
        return as_string(self)

    def as_number(self) -> float:
        from .getter import as_number
        return as_number(self)

    def as_bool(self) -> bool:
        from .getter import as_bool
        return as_bool(self)

    def get(self, name: str) -> Value:
        from .getter import get
        return get(self, name)

    def resolve(self, path: str) -> Value:
        from .getter import resolve_path
        return resolve_path(self, path)


@dataclass(frozen=True, slots=True)
class VTable(_Accessors):
    table: Table

    kind: ClassVar[str] = "table"

    def __str__(self) -> str:
        return f"Table({len(self.table)})"


@dataclass(frozen=True, slots=True)
class VString(_Accessors):
    value: str

    kind: ClassVar[str] = "string"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VNumber(_Accessors):
    value: float

    kind: ClassVar[str] = "number"

    def __str__(self) -> str:
        v = self.value
        if v.is_integer():
            return str(int(v))
        return str(v)


@dataclass(frozen=True, slots=True)
class VBool(_Accessors):
    value: bool

    kind: ClassVar[str] = "bool"

    def __str__(self) -> str:
        return str(self.value).lower()


Value = Union[VTable, VString, VNumber, VBool]
