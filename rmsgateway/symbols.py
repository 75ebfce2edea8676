"""A simple symbol table with variable assignment and substitution."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .strutil import strtrim

_WHITESPACE = " \t"


@dataclass
class _Symbol:
    name: str
    value: str


def _is_name_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in "_$"


class SymbolTable:
    """Named string values; newest entries are found first."""

    def __init__(self) -> None:
        self._symbols: deque[_Symbol] = deque()

    def _find(self, name: str) -> _Symbol | None:
        return next((sym for sym in self._symbols if sym.name == name), None)

    def lookup(self, name: str) -> str | None:
        """Return the value of ``name``, or None when it is not defined."""
        sym = self._find(name)
        return sym.value if sym is not None else None

    def add(self, name: str, value: str | None) -> None:
        """Put a new symbol at the front of the table.

        Raises ValueError when the name is empty.
        """
        if not name:
            raise ValueError("symbol name must not be empty")
        self._symbols.appendleft(_Symbol(name, value if value is not None else ""))

    def assign(self, name: str, value: str) -> None:
        """Add or replace a symbol, trimming blanks from name and value."""
        name = strtrim(name, _WHITESPACE, 0)
        value = strtrim(value, _WHITESPACE, 0)
        sym = self._find(name)
        if sym is None:
            self.add(name, value)
        else:
            sym.value = value

    def assign_text(self, text: str) -> None:
        """Handle an assignment of the form ``name=value``.

        The text is split at the last equal sign; without one the value
        is empty.
        """
        name, sep, value = text.rpartition("=")
        if not sep:
            name, value = text, ""
        self.assign(name, value)

    def substitute(self, text: str) -> str:
        """Replace ``$name`` references with their values.

        A backslash makes the next character literal.  Undefined
        variables are replaced with nothing.
        """
        out: list[str] = []
        name: list[str] | None = None
        escaped = False
        for ch in text:
            if escaped:
                out.append(ch)
                escaped = False
            elif name is not None:
                if _is_name_char(ch):
                    name.append(ch)
                else:
                    out.append(self.lookup("".join(name)) or "")
                    name = None
                    out.append(ch)
            elif ch == "\\":
                escaped = True
            elif ch == "$":
                name = []
            else:
                out.append(ch)
        if name is not None:
            out.append(self.lookup("".join(name)) or "")
        return "".join(out)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return ((sym.name, sym.value) for sym in self._symbols)