"""User-defined function representation for Tock."""

from __future__ import annotations

from io import StringIO

from tock import SExpression
from tock.types.symbol import Symbol


class Function:
    """A named function value created by `func`: formal parameters and body forms.

    There is no captured environment: a call evaluates the body against a copy
    of the caller's environment.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, name: Symbol, params: list[Symbol], body: list[SExpression]):
        self.name: Symbol = name
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body

    def __str__(self) -> str:
        return f"[function {self.name}]"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Function ")
            buffer.write(str(self.name))
            buffer.write(" (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()
