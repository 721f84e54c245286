"""Special form: switch.

(switch scrutinee
  (case key body...)
  ...
  (default body...))

Keys are literals and are never evaluated: numbers, strings, bare symbols or
quoted data. The scrutinee is compared against each key in order by loose
equality and the first matching clause's body runs; `default` matches
whenever it is reached.
"""

from tock import SExpression, LispValue, Evaluation
from tock.builtin.primitives import loose_equals
from tock.errors import ArityError, ArgumentTypeError
from tock.evaluation.sequence import evaluate_body, evaluate_operand
from tock.types.environment import Environment
from tock.types.symbol import CASE, DEFAULT, QUOTE
from tock.types.undefined import Undefined


def case_key(key: SExpression) -> LispValue:
    """The literal value a case key stands for."""
    if isinstance(key, list) and len(key) == 2 and key[0] == QUOTE:
        return key[1]
    return key


def switch_form(tail: list[SExpression], env: Environment, ctx, evaluate_fn) -> Evaluation:
    if not tail:
        raise ArityError("switch requires a value to dispatch on")

    scrutinee_expr, *clauses = tail
    value = yield from evaluate_operand(evaluate_fn, scrutinee_expr, env, ctx)

    for clause in clauses:
        if not isinstance(clause, list) or not clause:
            raise ArgumentTypeError(f"Malformed switch clause: {clause!r}")
        head, *rest = clause

        if head == DEFAULT:
            return (yield from evaluate_body(rest, env, ctx, evaluate_fn))

        if head == CASE:
            if not rest:
                raise ArityError("case requires a key")
            key, *body = rest
            if loose_equals(value, case_key(key)):
                return (yield from evaluate_body(body, env, ctx, evaluate_fn))
            continue

        raise ArgumentTypeError(f"switch clauses must start with case or default, got {head!r}")

    return Undefined
