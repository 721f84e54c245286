from tock import EvaluatorFn, LispValue
from tock import SExpression
from tock.errors import ArityError, ArgumentTypeError
from tock.types.environment import Environment
from tock.types.function import Function
from tock.types.symbol import Symbol
from tock.evaluation.sequence import immediate


@immediate
def func_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (func name (params...) body...) -- zero or more body forms, run in order.
    # A function with no body returns undefined.
    if len(tail) < 2:
        raise ArityError("func requires a name and a parameter list")

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise ArgumentTypeError(f"func name must be a Symbol, got {name!r}")
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise ArgumentTypeError(f"func {name} parameters must be a list of symbols")

    fn = Function(name, list(params), body)
    env.define(name, fn)
    return fn
