"""Sequential evaluation and ReturnSignal handling shared by the evaluator and
special forms."""

from __future__ import annotations

import functools
from typing import Callable

from tock import SExpression, LispValue, Evaluation, EvaluatorFn
from tock.types.environment import Environment
from tock.types.return_signal import ReturnSignal
from tock.types.undefined import Undefined


def evaluate_body(
    forms: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
    unwrap: bool = False,
) -> Evaluation:
    """Evaluate `forms` in order and return the last value.

    A ReturnSignal stops the sequence. Function bodies and implicit sequences
    pass `unwrap=True` and hand back its payload; blocks nested inside other
    forms (`while`, `switch` cases, `begin`) pass it upward untouched.
    """
    result = Undefined
    for form in forms:
        result = yield from evaluate_fn(form, env, ctx)
        if isinstance(result, ReturnSignal):
            return result.value if unwrap else result
    return result


def evaluate_operand(
    evaluate_fn: EvaluatorFn, expr: SExpression, env: Environment, ctx
) -> Evaluation:
    """Evaluate an argument position; a `return` there yields its payload."""
    value = yield from evaluate_fn(expr, env, ctx)
    if isinstance(value, ReturnSignal):
        return value.value
    return value


def immediate(handler: Callable[..., LispValue]) -> Callable[..., Evaluation]:
    """Adapt a special form that never evaluates anything to the generator protocol."""

    @functools.wraps(handler)
    def form(tail, env, ctx, evaluate_fn) -> Evaluation:
        yield from ()
        return handler(tail, env, ctx, evaluate_fn)

    return form
