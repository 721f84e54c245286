import pytest

from tock.errors import ArgumentTypeError, ArityError, DivisionByZeroError
from tock.evaluation.evaluator import evaluate_now
from tock.types.environment import Environment
from tock.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(* 2 3 4)", 24),
        ("(- 5)", -5),
        ("(- 10 3 2)", 5),
        ("(/ 12 3)", 4),
        ("(/ 12 3 2)", 2),
        ("(/ 2)", 0.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(+)", 0),
        ("(*)", 1),
        ("(% 7 3)", 1),
        ("(mod 7 3)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ('(+ "ab" "cd")', "abcd"),
        ("(< 1 2)", True),
        ("(> 1 2)", False),
        ("(<= 2 2)", True),
        ("(>= 1 2)", False),
        ("(== 2 2)", True),
        ('(== 1 "1")', True),
        ('(== "a" "a")', True),
        ('(== 1 "one")', False),
        ('(== 2 " 2 ")', True),
        ('(== 0 "")', True),
        ('(== 1000 "1_000")', False),
        ('(== 1 "1e0")', False),
        ('(!= 5 "inf")', True),
        ("(!= 1 2)", True),
        ("(== '(1 2) (list 1 2))", True),
        ("(! 0)", True),
        ("(! 1)", False),
        ("(! nil)", True),
    ]
)
def test_arithmetic_and_comparison(interp, source, expected):
    assert interp.eval(source) == expected


def test_evaluate_raw_forms():
    env = Environment.global_env()
    plus, times, minus = Symbol("+"), Symbol("*"), Symbol("-")
    assert evaluate_now([plus, 1.0, 2.0, 3.0], env) == 6
    assert evaluate_now([times, 2.0, 3.0, 4.0], env) == 24
    assert evaluate_now([minus, 5.0], env) == -5


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(% 1 0)", "(mod 5 0)"])
def test_division_by_zero(interp, source):
    with pytest.raises(DivisionByZeroError):
        interp.eval(source)


@pytest.mark.parametrize(
    "source",
    [
        '(+ 1 "a")',
        '(* 2 "3")',
        "(- '(1))",
        '(< 1 "a")',
        "(% 1 '(2))",
        "(+ '(1) '(2))",
        "(+ 1 (< 1 2))",
        "(- (< 1 2) 1)",
        "(/ 4 (> 2 1))",
        '(- "5" 1)',
    ],
)
def test_wrong_argument_types(interp, source):
    with pytest.raises(ArgumentTypeError):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(-)", "(< 1)", "(== 1 2 3)", "(! 1 2)"])
def test_wrong_arity(interp, source):
    with pytest.raises(ArityError):
        interp.eval(source)


def test_error_reason(interp):
    with pytest.raises(DivisionByZeroError) as info:
        interp.eval("(/ 1 0)")
    assert info.value.reason == "division by zero"
