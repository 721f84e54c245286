"""Built-in operators for the Tock evaluator.

This module defines arithmetic, comparison, logical-not and list primitives.
They receive already-evaluated arguments; forms that need unevaluated operands
(`and`, `or`, `def`, ...) live in tock.evaluation.special_forms.
"""
from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from tock import LispValue
from tock.errors import ArgumentTypeError, ArityError, DivisionByZeroError
from tock.reader.lexer import NUMBER_RE
from tock.types.environment import Environment
from tock.types.symbol import Symbol
from tock.types.undefined import Undefined

Primitive = Callable[[Environment, list[LispValue]], LispValue]


def is_truthy(value: LispValue) -> bool:
    """Host truthiness: False, 0, "", the empty list and undefined are falsy."""
    return bool(value)


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def loose_equals(a: LispValue, b: LispValue) -> bool:
    """Non-strict equality: a number equals text that reads as the same number."""
    if _is_number(a) and isinstance(b, str):
        a, b = b, a
    if isinstance(a, str) and _is_number(b):
        text = a.strip() or "0"
        # Only text spelled like a number literal converts
        if not NUMBER_RE.fullmatch(text):
            return False
        return float(text) == b
    return a == b


def _require_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise ArityError(f"{name} requires exactly {n} argument{'s' if n != 1 else ''}, got {len(args)}")


def _require_list(name: str, x: LispValue) -> list:
    if not isinstance(x, list):
        raise ArgumentTypeError(f"{name} expects a list, got {type(x).__name__}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _require_numbers(name: str, args: list[LispValue]) -> None:
    if not all(_is_number(x) for x in args):
        raise ArgumentTypeError(f"All arguments to {name} must be numbers")


def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Sum of all arguments, or their concatenation when every argument is text."""
    if not expr:
        return 0.0
    if all(isinstance(x, str) for x in expr):
        return "".join(expr)
    if not all(_is_number(x) for x in expr):
        raise ArgumentTypeError("All arguments to + must be numbers or all text")
    return reduce(operator.add, expr)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise ArityError("- requires at least 1 argument")
    _require_numbers("-", expr)
    if len(expr) == 1:
        return -expr[0]
    return reduce(operator.sub, expr)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; errors if any arg is non-numeric."""
    result = 1.0
    for x in expr:
        if not _is_number(x):
            raise ArgumentTypeError("All arguments to * must be numbers")
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns reciprocal."""
    if not expr:
        raise ArityError("/ requires at least 1 argument")
    _require_numbers("/", expr)
    try:
        if len(expr) == 1:
            return 1.0 / expr[0]
        return reduce(operator.truediv, expr)
    except ZeroDivisionError:
        raise DivisionByZeroError("Division by zero")


def mod(env: Environment, expr: list[LispValue]) -> LispValue:
    """(% n d) => n % d, sign following the divisor as Python does."""
    _require_arity("mod", expr, 2)
    n, d = expr
    if not _is_number(n) or not _is_number(d):
        raise ArgumentTypeError("All arguments to mod must be numbers")
    if d == 0:
        raise DivisionByZeroError("Modulo by zero")
    return n % d


# -------------------------------
# Comparison
# -------------------------------
def _ordering(name: str, op: Callable[[LispValue, LispValue], bool]) -> Primitive:
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        _require_arity(name, expr, 2)
        a, b = expr
        try:
            return bool(op(a, b))
        except TypeError:
            raise ArgumentTypeError(
                f"Cannot compare {type(a).__name__} and {type(b).__name__} with {name}"
            )
    compare.__name__ = f"compare_{op.__name__}"
    compare.__doc__ = f"Binary {name}."
    return compare


lt = _ordering("<", operator.lt)
gt = _ordering(">", operator.gt)
lte = _ordering("<=", operator.le)
gte = _ordering(">=", operator.ge)


def equals(env: Environment, expr: list[LispValue]) -> bool:
    _require_arity("==", expr, 2)
    return loose_equals(*expr)


def not_equals(env: Environment, expr: list[LispValue]) -> bool:
    _require_arity("!=", expr, 2)
    return not loose_equals(*expr)


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Logical NOT of a single value under host truthiness."""
    _require_arity("!", expr, 1)
    return not is_truthy(expr[0])


# -------------------------------
# Lists
# -------------------------------
def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """First element of a list; undefined for the empty list."""
    _require_arity("car", expr, 1)
    xs = _require_list("car", expr[0])
    return xs[0] if xs else Undefined


def cdr(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """All but the first element, as a new list."""
    _require_arity("cdr", expr, 1)
    return _require_list("cdr", expr[0])[1:]


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Prepend head to a list, non-destructively."""
    _require_arity("cons", expr, 2)
    head, tail = expr
    return [head, *_require_list("cons", tail)]


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments (identity)."""
    return list(expr)


def length(env: Environment, expr: list[LispValue]) -> float:
    _require_arity("length", expr, 1)
    return float(len(_require_list("length", expr[0])))


def reverse(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _require_arity("reverse", expr, 1)
    return _require_list("reverse", expr[0])[::-1]


def append(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new list."""
    result: list[LispValue] = []
    for item in expr:
        result.extend(_require_list("append", item))
    return result


PRIMITIVES: dict[Symbol, Primitive] = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("%"): mod,
    Symbol("mod"): mod,
    Symbol("<"): lt,
    Symbol(">"): gt,
    Symbol("<="): lte,
    Symbol(">="): gte,
    Symbol("=="): equals,
    Symbol("!="): not_equals,
    Symbol("!"): logical_not,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("cons"): cons,
    Symbol("list"): list_builtin,
    Symbol("length"): length,
    Symbol("reverse"): reverse,
    Symbol("append"): append,
}
