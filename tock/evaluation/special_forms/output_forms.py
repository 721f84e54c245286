"""Special forms that reach the host: cout and fillRect.

The target id is taken literally from the source (a bare name or a string);
every other operand is evaluated. Any failure raised by the capability is
re-raised as CapabilityError.
"""

from tock import SExpression, LispValue, Evaluation, EvaluatorFn
from tock.errors import ArityError, ArgumentTypeError, CapabilityError
from tock.evaluation.sequence import evaluate_operand
from tock.printer import render
from tock.types.environment import Environment
from tock.types.symbol import Symbol
from tock.types.undefined import Undefined


def target_id(form: str, expr: SExpression) -> str:
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, str):
        return expr
    raise ArgumentTypeError(f"{form} target must be a name or a string, got {expr!r}")


def _number(form: str, value: LispValue) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentTypeError(f"{form} expects numeric coordinates, got {value!r}")
    return value


def cout_form(
    tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn
) -> Evaluation:
    """(cout sink-id expr): append the rendered value as a line; returns the value."""
    if len(tail) != 2:
        raise ArityError("cout requires exactly 2 arguments: (cout sink-id expr)")
    sink_id = target_id("cout", tail[0])
    value = yield from evaluate_operand(evaluate_fn, tail[1], env, ctx)

    if ctx.sink is None:
        raise CapabilityError("cout: no text sink is attached")
    try:
        ctx.sink.write(sink_id, render(value))
    except Exception as ex:
        raise CapabilityError(f"cout to {sink_id!r} failed: {ex}") from ex
    return value


def fill_rect_form(
    tail: list[SExpression], env: Environment, ctx, evaluate_fn: EvaluatorFn
) -> Evaluation:
    """(fillRect surface-id x y width height [color])"""
    if len(tail) not in (5, 6):
        raise ArityError("fillRect requires a surface id, x, y, width, height and an optional color")
    surface_id = target_id("fillRect", tail[0])

    coords = []
    for expr in tail[1:5]:
        coords.append(_number("fillRect", (yield from evaluate_operand(evaluate_fn, expr, env, ctx))))
    x, y, width, height = coords
    color = None
    if len(tail) == 6:
        color = yield from evaluate_operand(evaluate_fn, tail[5], env, ctx)
        if isinstance(color, Symbol):
            color = color.id
        elif not isinstance(color, str):
            raise ArgumentTypeError(f"fillRect color must be text, got {color!r}")

    if ctx.surface is None:
        raise CapabilityError("fillRect: no drawing surface is attached")
    try:
        ctx.surface.fill_rectangle(surface_id, x, y, width, height, color)
    except Exception as ex:
        raise CapabilityError(f"fillRect on {surface_id!r} failed: {ex}") from ex
    return Undefined
