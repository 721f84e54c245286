"""Runtime environment for Tock.

The Environment stores bindings of Symbols to evaluated values. There is no
`outer` link: a function call works on a full copy of the caller's bindings
(copy-in, discard-out), so nothing done inside a call leaks back out and a
call never observes bindings made by its caller after the call began.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from tock import LispValue
from tock.errors import UndefinedVariableError, ArgumentTypeError
from tock.types.symbol import Symbol, NIL


class Environment:
    """Flat mapping from Symbols to values, copied wholesale per call."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[Symbol, LispValue] | None = None):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}

    @classmethod
    def global_env(cls) -> Environment:
        """Fresh program-level environment, seeded with `nil` bound to the empty list."""
        return cls({NIL: []})

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, overwriting any existing binding.

        Raises ArgumentTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ArgumentTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name`.

        Raises UndefinedVariableError if the symbol is not bound.
        """
        if name not in self.vars:
            raise UndefinedVariableError(f"Undefined variable: {name}")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedVariableError(f"Undefined variable: {name}") from None

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        return self.vars.get(name, default)

    def copy(self) -> Environment:
        """Snapshot every visible binding into a new, independent Environment."""
        return Environment(self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
