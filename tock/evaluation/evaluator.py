"""Core tree-walking evaluator for the Tock interpreter.

Every evaluation function is a generator. Nested evaluation uses
`yield from`, so when a `while` checkpoint yields a Pause the whole chain of
pending evaluations is suspended with it and continues exactly where it
stopped once the driver resumes it. Nothing else ever yields.
"""

from __future__ import annotations

from tock import SExpression, LispValue, Evaluation
from tock.builtin.primitives import PRIMITIVES
from tock.errors import RecursionDepthError
from tock.evaluation.apply import apply_function
from tock.evaluation.context import EvalContext
from tock.evaluation.sequence import evaluate_body, evaluate_operand
from tock.evaluation.special_forms import SPECIAL_FORMS
from tock.types.environment import Environment
from tock.types.return_signal import ReturnSignal
from tock.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment, ctx: EvalContext) -> Evaluation:
    """Evaluate one form. Returns a value or a ReturnSignal."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        case [Symbol() as head, *tail]:
            # --- Special forms: operands are handed over unevaluated ---
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return (yield from form(tail, env, ctx, evaluate))

            # --- Primitives: evaluate operands left to right, then apply ---
            primitive = PRIMITIVES.get(head)
            if primitive is not None:
                args = []
                for arg in tail:
                    args.append((yield from evaluate_operand(evaluate, arg, env, ctx)))
                return primitive(env, args)

            # --- User-defined function call ---
            return (yield from apply_function(head, tail, env, ctx, evaluate))

        case list():
            # Head is not a symbol: the list is an implicit sequence.
            return (yield from evaluate_body(expr, env, ctx, evaluate, unwrap=True))

    # --- Atoms return as-is ---
    return expr


def evaluate_program(
    program: list[SExpression], env: Environment, ctx: EvalContext
) -> Evaluation:
    """Evaluate top-level forms in order; a top-level `return` ends the program."""
    return (yield from evaluate_body(program, env, ctx, evaluate, unwrap=True))


def evaluate_now(
    expr: SExpression, env: Environment, ctx: EvalContext | None = None
) -> LispValue:
    """Evaluate `expr` to completion, running straight through pause points."""
    if ctx is None:
        ctx = EvalContext()
    gen = evaluate(expr, env, ctx)
    try:
        while True:
            next(gen)
    except StopIteration as stop:
        result = stop.value
    except RecursionError:
        raise RecursionDepthError("Maximum recursion depth exceeded") from None
    if isinstance(result, ReturnSignal):
        return result.value
    return result
