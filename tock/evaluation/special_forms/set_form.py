from tock import EvaluatorFn, Evaluation
from tock import SExpression
from tock.errors import ArityError, ArgumentTypeError
from tock.evaluation.sequence import evaluate_operand
from tock.types.symbol import Symbol
from tock.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    if len(tail) != 2:
        raise ArityError("set requires exactly 2 arguments: (set var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ArgumentTypeError(f"set first argument must be a Symbol, got {var_sym!r}")
    value = yield from evaluate_operand(evaluate_fn, val_expr, env, ctx)
    env.set(var_sym, value)

    return value
