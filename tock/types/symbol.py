"""Symbols: one shared object per name.

The reader creates a Symbol for every identifier it meets, and environments
and the form tables are keyed by them, so `Symbol("x") is Symbol("x")`.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("id", "_hash")

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            sym._hash = hash(sym.id)
            cls._table[sym.id] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.id == other.id)

    def __hash__(self) -> int:
        return self._hash

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


QUOTE = Symbol("quote")
ELSE = Symbol("else")
CASE = Symbol("case")
DEFAULT = Symbol("default")
NIL = Symbol("nil")
