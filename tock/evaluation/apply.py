"""Application of user-defined functions.

A call snapshots the caller's environment: arguments are evaluated in the
caller's environment, the whole environment is copied, parameters are bound
in the copy and the body runs there. The copy is dropped when the call
returns, so `def`/`set` inside a body never reach the caller.
"""

from __future__ import annotations

from tock import SExpression, Evaluation, EvaluatorFn
from tock.errors import UndefinedFunctionError
from tock.evaluation.sequence import evaluate_body, evaluate_operand
from tock.types.environment import Environment
from tock.types.function import Function
from tock.types.symbol import Symbol


def apply_function(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> Evaluation:
    fn = env.get(name)
    if not isinstance(fn, Function):
        raise UndefinedFunctionError(f"Undefined function: {name}")

    # Arguments beyond the parameter list are never evaluated; missing ones
    # leave their parameters unbound.
    args = []
    for expr in arg_exprs[:len(fn.params)]:
        args.append((yield from evaluate_operand(evaluate_fn, expr, env, ctx)))

    call_env = env.copy()
    for param, value in zip(fn.params, args):
        call_env.define(param, value)

    return (yield from evaluate_body(fn.body, call_env, ctx, evaluate_fn, unwrap=True))
