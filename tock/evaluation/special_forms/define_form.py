from tock import EvaluatorFn, Evaluation
from tock import SExpression
from tock.errors import ArityError
from tock.evaluation.sequence import evaluate_operand
from tock.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    """
    (def name value)
    Binds or overwrites `name` in the current environment and returns the value.
    """
    if len(tail) != 2:
        raise ArityError("def requires exactly 2 arguments: (def name value)")

    name, val_expr = tail
    value = yield from evaluate_operand(evaluate_fn, val_expr, env, ctx)
    env.define(name, value)
    return value
