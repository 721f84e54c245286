import logging

import pytest
from hypothesis import given, strategies as st

from tock.errors import LexError, ParseError
from tock.printer import to_source
from tock.reader.lexer import Token, TokenKind, tokenize
from tock.reader.parser import parse, parse_source
from tock.types.symbol import Symbol, QUOTE

LP, RP, Q = TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN, TokenKind.QUOTE
NUM, STR, ID, KW = TokenKind.NUMBER, TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.KEYWORD


def kinds_and_text(source):
    return [(t.kind, t.text) for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(ID, "a")]),
        ("'a", [(Q, "'"), (ID, "a")]),
        ("(a b c)", [(LP, "("), (ID, "a"), (ID, "b"), (ID, "c"), (RP, ")")]),
        ('"hello world"', [(STR, "hello world")]),
        ('"(not a list)"', [(STR, "(not a list)")]),
        ("42 3.14 -5 +7", [(NUM, "42"), (NUM, "3.14"), (NUM, "-5"), (NUM, "+7")]),
        ("(- 5)", [(LP, "("), (ID, "-"), (NUM, "5"), (RP, ")")]),
        ("(+ 1 2)", [(LP, "("), (ID, "+"), (NUM, "1"), (NUM, "2"), (RP, ")")]),
        ("<= >= != ==", [(ID, "<="), (ID, ">="), (ID, "!="), (ID, "==")]),
        ("< > ! =", [(ID, "<"), (ID, ">"), (ID, "!"), (ID, "=")]),
        ("<x", [(ID, "<"), (ID, "x")]),
        ("def define", [(KW, "def"), (ID, "define")]),
        ("if else while return func var let const set",
         [(KW, w) for w in "if else while return func var let const set".split()]),
        ("fillRect a-b x1 my_var", [(ID, "fillRect"), (ID, "a-b"), (ID, "x1"), (ID, "my_var")]),
        (" ; comment\n a b", [(ID, "a"), (ID, "b")]),
        ("(a) ; trailing", [(LP, "("), (ID, "a"), (RP, ")")]),
        ("12abc", [(NUM, "12"), (ID, "abc")]),
    ]
)
def test_lexer_basic(source, expected):
    assert kinds_and_text(source) == expected


def test_token_positions():
    assert tokenize('(cout out "x")') == [
        Token(LP, "(", 0),
        Token(ID, "cout", 1),
        Token(ID, "out", 6),
        Token(STR, "x", 10),
        Token(RP, ")", 13),
    ]


def test_unterminated_string():
    with pytest.raises(LexError) as info:
        tokenize('(cout out "abc)')
    assert info.value.pos == 10


@pytest.mark.parametrize("source", ["{", "(a [b])", "(a , b)", "`x"])
def test_unexpected_character(source):
    with pytest.raises(LexError):
        tokenize(source)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("x", Symbol("x")),
        ("def", Symbol("def")),
        ("'a", [QUOTE, Symbol("a")]),
        ("'(1 2)", [QUOTE, [1.0, 2.0]]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
    ]
)
def test_parser(source, expected):
    result = parse_source(source)
    assert result == [expected]     # Parser yields one expression


def test_parser_numbers_are_floats():
    [n] = parse_source("7")
    assert isinstance(n, float)


def test_symbols_are_shared_objects():
    [[head, name], other] = parse_source("(def x) x")
    assert name is other is Symbol("x")
    assert head is Symbol("def")
    assert name != head
    assert len({Symbol("x"), name, other}) == 1


def test_parse_multiple_top_level_forms():
    assert parse(tokenize("(def x 1) x")) == [[Symbol("def"), Symbol("x"), 1.0], Symbol("x")]


def test_stray_top_level_paren_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="tock.reader.parser"):
        assert parse_source(") (a) )") == [[Symbol("a")]]
    assert "stray ')'" in caplog.text


@pytest.mark.parametrize("source", ["(a (b)", "(", "((a b)", "'"])
def test_structural_errors(source):
    with pytest.raises(ParseError):
        parse_source(source)


def test_dangling_quote_inside_list():
    with pytest.raises(ParseError):
        parse_source("(a ')")


def test_empty_source():
    assert parse_source("  ; nothing here\n") == []


@pytest.mark.parametrize(
    "source,text",
    [
        ("(0.0000001)", "(0.0000001)"),
        ("(1000000000000000000000000)", "(1000000000000000000000000)"),
        ("-2.50", "-2.5"),
        ("7.0", "7"),
    ]
)
def test_numbers_print_without_exponent(source, text):
    [form] = parse_source(source)
    assert to_source(form) == text
    assert parse_source(text) == [form]


# Round-trip: printing a parsed form and reading it back yields the same form

SYMBOLS = ["x", "foo", "def", "if", "while", "+", "-", "<=", "==", "!", "car", "fillRect", "a-b", "x1"]

atoms = st.one_of(
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(alphabet="abc xyz()';01", max_size=6),
    st.sampled_from(SYMBOLS).map(Symbol),
)
forms = st.recursive(
    atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        children.map(lambda f: [QUOTE, f]),
    ),
    max_leaves=20,
)


@given(forms)
def test_print_parse_round_trip(form):
    assert parse_source(to_source(form)) == [form]
