from tock import EvaluatorFn, Evaluation
from tock import SExpression
from tock.evaluation.sequence import evaluate_body
from tock.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    return (yield from evaluate_body(tail, env, ctx, evaluate_fn))
