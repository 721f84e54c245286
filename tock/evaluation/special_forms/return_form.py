from tock import SExpression, Evaluation, EvaluatorFn
from tock.errors import ArityError
from tock.evaluation.sequence import evaluate_operand
from tock.types.return_signal import ReturnSignal
from tock.types.undefined import Undefined


def return_form(
    tail: list[SExpression], env, ctx, evaluate_fn: EvaluatorFn
) -> Evaluation:
    """(return [expr]): wrap the value so enclosing sequences stop."""
    if len(tail) > 1:
        raise ArityError("return takes at most 1 argument")
    value = Undefined
    if tail:
        value = yield from evaluate_operand(evaluate_fn, tail[0], env, ctx)
    return ReturnSignal(value)
