"""TableRepl: interactive shell for trying out table literals.

Also provides the ``tablelit-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import sys
from typing import IO

from .errors import TablelitError
from .getter import resolve_path
from .parser import parse
from .table import Table
from .values import Value, VString, VTable


# ---------------------------------------------------------------------------
# TableRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class TableRepl:
    """Keeps the most recently parsed table so it can be queried.

    Usage::

        repl = TableRepl()
        repl.eval('{server = {host = "localhost", port = 8080}}')
        repl.query("server.port")   # → VNumber(8080.0)
        repl.reset()
    """

    def __init__(self) -> None:
        self.last: Table | None = None

    def eval(self, text: str) -> Table:
        """Parse *text* and remember the result as ``last``."""
        self.last = parse(text)
        return self.last

    def query(self, path: str) -> Value:
        """Resolve a dotted *path* against the last parsed table."""
        if self.last is None:
            raise TablelitError("no table has been parsed yet")
        return resolve_path(VTable(self.last), path)

    def reset(self) -> None:
        self.last = None


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VString):
        return f'"{value.value}"'
    return str(value)


def _fmt_inspect(table: Table, indent: int = 0) -> str:
    """Pretty-print a table tree; anonymous entries show their position."""
    pad = "  " * indent
    if not len(table):
        return "Table {}"
    lines = ["Table {"]
    for i, entry in enumerate(table, 1):
        label = entry.key if entry.key is not None else f"<{i}>"
        if isinstance(entry.value, VTable):
            shown = _fmt_inspect(entry.value.table, indent + 1)
        else:
            shown = _fmt_inline(entry.value)
        lines.append(f"{pad}  {label}: {shown}")
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _print_error(exc: Exception) -> None:
    print(f"Error: {exc}", file=sys.stderr)


def _process_line(repl: TableRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":reset":
        repl.reset()
        return True

    if line == ":last":
        if repl.last is None:
            print("  (no table parsed yet)", file=dest)
        else:
            print(_fmt_inspect(repl.last), file=dest)
        return True

    try:
        # ── inspect() / i() ───────────────────────────────────────────────
        for prefix in ("inspect(", "i("):
            if line.startswith(prefix) and line.endswith(")"):
                print(_fmt_inspect(parse(line[len(prefix):-1])), file=dest)
                return True

        # ── ? path ────────────────────────────────────────────────────────
        if line.startswith("? "):
            result = repl.query(line[2:].strip())
            if isinstance(result, VTable):
                print(_fmt_inspect(result.table), file=dest)
            else:
                print(_fmt_inline(result), file=dest)
            return True

        # ── Table literal ─────────────────────────────────────────────────
        repl.eval(line)
    except TablelitError as exc:
        _print_error(exc)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive shell (``tablelit-repl`` / ``python -m tablelit.repl``)."""
    repl = TableRepl()

    print("tablelit REPL  (:q to quit  |  :last  :reset  |  ? <path>  inspect(<table>))")

    while True:
        try:
            line = input("tbl> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break


if __name__ == "__main__":
    main()
