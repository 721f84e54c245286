"""The `while` loop, the only construct that reaches a pause point."""

from __future__ import annotations
from tock import SExpression, EvaluatorFn, Evaluation
from tock.builtin.primitives import is_truthy
from tock.errors import ArityError
from tock.evaluation.sequence import evaluate_body, evaluate_operand
from tock.types.environment import Environment
from tock.types.return_signal import ReturnSignal
from tock.types.undefined import Undefined


def while_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    """(while cond body...): run body while cond is truthy.

    After every full pass of the body the run's checkpoint is consulted, which
    may suspend evaluation here. A `return` in the body ends the loop and
    travels on to the enclosing function.
    """
    if not tail:
        raise ArityError("while requires a condition")

    cond_expr, *body = tail
    while is_truthy((yield from evaluate_operand(evaluate_fn, cond_expr, env, ctx))):
        result = yield from evaluate_body(body, env, ctx, evaluate_fn)
        if isinstance(result, ReturnSignal):
            return result
        yield from ctx.checkpoint()
    return Undefined
