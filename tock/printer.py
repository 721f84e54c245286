"""Textual forms of values and code.

- render: what `cout` writes for a runtime value.
- to_source: re-serialize a parsed form so that reading it back yields an
  equal form (formatting and comments are not preserved).
"""

from __future__ import annotations

import math

import numpy as np

from tock import LispValue, SExpression
from tock.types.function import Function
from tock.types.symbol import Symbol, QUOTE
from tock.types.undefined import UndefinedType


def format_number(x: float) -> str:
    """Numbers print without a trailing `.0` when they are whole."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


def source_number(x: float) -> str:
    """Shortest digits that read back as `x`, never in exponent form."""
    if not math.isfinite(x):
        raise TypeError(f"No literal for {x!r}")
    return np.format_float_positional(x, trim="-")


def render(value: LispValue) -> str:
    """Render a runtime value; lists as parenthesized, space separated elements."""
    match value:
        case list():
            return "(" + " ".join(render(v) for v in value) + ")"
        case bool():
            return "true" if value else "false"
        case float() | int():
            return format_number(float(value))
        case UndefinedType():
            return "undefined"
        case Symbol() | Function():
            return str(value)
        case _:
            return str(value)


def to_source(expr: SExpression) -> str:
    """Print a form in reader syntax."""
    if isinstance(expr, list):
        if len(expr) == 2 and expr[0] == QUOTE:
            return "'" + to_source(expr[1])
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    if isinstance(expr, str):
        return f'"{expr}"'
    if isinstance(expr, float):
        return source_number(expr)
    if isinstance(expr, Symbol):
        return expr.id
    raise TypeError(f"Not a source form: {expr!r}")
