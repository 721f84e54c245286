from tock import SExpression, Evaluation
from tock.builtin.primitives import is_truthy
from tock.errors import ArityError
from tock.evaluation.sequence import evaluate_operand
from tock.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn) -> Evaluation:
    """Short-circuiting logical AND special form.

    (and a b) evaluates a; if it is falsy it is returned without evaluating b,
    otherwise the value of b is returned.
    """
    if len(tail) != 2:
        raise ArityError("and requires exactly 2 arguments")
    left = yield from evaluate_operand(evaluate_fn, tail[0], env, ctx)
    if not is_truthy(left):
        return left
    return (yield from evaluate_operand(evaluate_fn, tail[1], env, ctx))


def or_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn) -> Evaluation:
    """Short-circuiting logical OR special form.

    (or a b) evaluates a; if it is truthy it is returned without evaluating b,
    otherwise the value of b is returned.
    """
    if len(tail) != 2:
        raise ArityError("or requires exactly 2 arguments")
    left = yield from evaluate_operand(evaluate_fn, tail[0], env, ctx)
    if is_truthy(left):
        return left
    return (yield from evaluate_operand(evaluate_fn, tail[1], env, ctx))
