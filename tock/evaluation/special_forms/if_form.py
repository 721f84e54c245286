from tock import EvaluatorFn, Evaluation
from tock import SExpression
from tock.builtin.primitives import is_truthy
from tock.errors import ArityError
from tock.evaluation.sequence import evaluate_operand
from tock.types.environment import Environment
from tock.types.symbol import ELSE
from tock.types.undefined import Undefined


def if_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    """(if cond then [else] [alt]); the `else` marker is optional."""
    if len(tail) < 2:
        raise ArityError("if requires a condition and a then-expression")

    cond_expr, then_expr, *rest = tail
    if rest and rest[0] == ELSE:
        rest = rest[1:]

    cond = yield from evaluate_operand(evaluate_fn, cond_expr, env, ctx)

    if is_truthy(cond):
        return (yield from evaluate_fn(then_expr, env, ctx))
    elif rest:
        return (yield from evaluate_fn(rest[0], env, ctx))
    else:
        return Undefined
