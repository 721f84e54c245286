# Core type aliases for Tock's data model.
# We use plain Python types (float, str, bool, list) plus a few small classes
# (Symbol, Function, ReturnSignal, Undefined) to represent both code (forms)
# and runtime values. No explicit Cons type is defined.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable: a quoted form is a value.

from typing import Any, Callable, Generator

# Runtime value alias
LispValue = Any
# Forms alias (quoted forms flow into the runtime unchanged)
SExpression = LispValue

# Every evaluation step is a generator: it yields only at cooperative pause
# points and returns the computed value.
Evaluation = Generator[Any, None, LispValue]

# Evaluator function type used inside special forms
EvaluatorFn = Callable[..., Evaluation]
