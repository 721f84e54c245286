from tock import SExpression, LispValue, EvaluatorFn
from tock.errors import ArityError
from tock.evaluation.sequence import immediate


@immediate
def quote_form(
    tail: list[SExpression], env, ctx, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ArityError("Quote expects exactly 1 argument")
    return tail[0]
