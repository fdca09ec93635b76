import math

import pytest
from hypothesis import given, strategies as st

from tale.errors import TaleGenericError, TaleReaderError
from tale.printer import to_string
from tale.reader.lexer import tokenize
from tale.reader.parser import FLOAT_RE, TokenStream, parse, parse_all, parse_atom, read_seq
from tale.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("((a)b)", ["(", "(", "a", ")", "b", ")"]),
        ("  (def   x\n\t10)  ", ["(", "def", "x", "10", ")"]),
        ("", []),
        ("   \n\t ", []),
        ("a;b", ["a;b"]),                       # no comments
        ('"hi there"', ['"hi', 'there"']),      # no string literals
        (")(", [")", "("]),
    ]
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("true", True),
        ("false", False),
        ("1", 1.0),
        ("-2", -2.0),
        ("+3", 3.0),
        ("1.5", 1.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
        ("abc", Symbol("abc")),
        ("True", Symbol("True")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        (".", Symbol(".")),
        ("1e", Symbol("1e")),
        ("1_000", Symbol("1_000")),
        ("\u0661", Symbol("\u0661")),       # non-ASCII digit
        ("x1", Symbol("x1")),
    ]
)
def test_parse_atom(token, expected):
    result = parse_atom(token)
    assert type(result) is type(expected)
    assert result == expected


def test_parse_atom_nan():
    result = parse_atom("NaN")
    assert isinstance(result, float) and math.isnan(result)


def test_numbers_are_floats():
    expr, _ = parse(tokenize("(1 2.0)"))
    assert all(type(x) is float for x in expr)


def test_parse_returns_remaining_tokens():
    expr, rest = parse(tokenize("(+ 1 2) (foo) bar"))
    assert expr == [Symbol("+"), 1.0, 2.0]
    assert rest == ["(", "foo", ")", "bar"]


def test_parse_nested_lists():
    expr, rest = parse(tokenize("((a b) (c (d)))"))
    assert expr == [[Symbol("a"), Symbol("b")], [Symbol("c"), [Symbol("d")]]]
    assert rest == []


def test_parse_empty_list():
    assert parse(tokenize("()")) == ([], [])


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "Could not get token from expression"),
        (")", "Unexpected `)`"),
        ("(1 (2", "Could not find closing `)`"),
        ("(", "Could not find closing `)`"),
        ("(1 ))", None),  # first form reads fine; `)` is left over
    ]
)
def test_parse_errors(source, message):
    if message is None:
        expr, rest = parse(tokenize(source))
        assert expr == [1.0]
        assert rest == [")"]
        return
    with pytest.raises(TaleReaderError) as ex:
        parse(tokenize(source))
    assert str(ex.value) == message
    assert isinstance(ex.value, TaleGenericError)


def test_read_seq_after_open_paren():
    items, rest = read_seq(["1", "x", ")", "y"])
    assert items == [1.0, Symbol("x")]
    assert rest == ["y"]


def test_read_seq_unterminated():
    with pytest.raises(TaleReaderError):
        read_seq(["1", "2"])


def test_parse_all_reads_every_form():
    forms = list(parse_all(tokenize("(def x 1) x (+ x 2)")))
    assert forms == [
        [Symbol("def"), Symbol("x"), 1.0],
        Symbol("x"),
        [Symbol("+"), Symbol("x"), 2.0],
    ]


def test_token_stream_cursor():
    stream = TokenStream(["(", "a", ")", "b"])
    assert stream.peek() == "("
    assert stream.parse_expr() == [Symbol("a")]
    assert stream.remaining() == ["b"]
    assert not stream.at_end()
    assert stream.parse_expr() == Symbol("b")
    assert stream.at_end()


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu", "Nd"), include_characters="-_*+?!<>=/"),
    min_size=1, max_size=8,
).filter(lambda s: s not in ("true", "false") and not FLOAT_RE.fullmatch(s))

number_strat = st.floats(allow_nan=False)

atom_strat = st.one_of(symbol_strat.map(Symbol), number_strat, st.booleans())

expr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=4), max_leaves=20)


def _same(a, b):
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return type(a) is type(b) and a == b


@given(expr_strat)
def test_display_round_trip(expr):
    # Lists render with commas; swap them for spaces before reading back
    source = to_string(expr).replace(",", " ")
    parsed, rest = parse(tokenize(source))
    assert rest == []
    assert _same(parsed, expr)


@given(st.text(max_size=40))
def test_tokenize_never_fails(text):
    tokens = tokenize(text)
    assert all(tok and not any(c.isspace() for c in tok) for tok in tokens)
