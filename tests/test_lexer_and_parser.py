import io

import pytest
from hypothesis import given, strategies as st

from sevenlang.errors import LexError, ParseError
from sevenlang.evaluation.builtins import BuiltinOp
from sevenlang.evaluation.call import Call, Variable
from sevenlang.evaluation.special_forms import Define, If, Lambda, ListForm, MapForm
from sevenlang.reader.lexer import EOF, Lexer, Token, TokenType, tokenize
from sevenlang.reader.parser import TokenStream, parse
from sevenlang.reader.syntax import SyntaxAtom, SyntaxList
from sevenlang.types.values import BoolValue, NumberValue, StringValue


def texts(source):
    return [t.text for t in tokenize(source)]


def ident(name):
    return SyntaxAtom(Token(TokenType.IDENTIFIER, name))


def number(value):
    return SyntaxAtom(Token(TokenType.NUMBER, float(value)))


# -----------------------------------------------------
# Lexer
# -----------------------------------------------------

def test_lexer_normal():
    assert texts("(+ 1.1 2);comment") == ["(", "+", "1.1", "2", ")", "comment", "<EOF>"]


def test_lexer_comment_keeps_rest_of_line():
    assert texts("(+ 1.1 2);this is a comment.") == [
        "(", "+", "1.1", "2", ")", "this is a comment.", "<EOF>"
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(", "("),
        (" ( ", "("),
        (")", ")"),
        (" ) ", ")"),
        ("begin", "begin"),
        (" begin ", "begin"),
        ('"wow"', "wow"),
        (' "wow" ', "wow"),
        ("0.5", "0.5"),
        (" 0.5 ", "0.5"),
        ("#t", "#t"),
        ("#f", "#f"),
        ("<=", "<="),
        ("!=", "!="),
        ("a1+b", "a1+b"),
        ("-5", "-5"),  # a leading '-' makes it an identifier
    ]
)
def test_single_token(source, expected):
    assert texts(source) == [expected, "<EOF>"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1", Token(TokenType.NUMBER, 1.0)),
        ("12.", Token(TokenType.NUMBER, 12.0)),
        ("#t", Token(TokenType.BOOLEAN, True)),
        ("#f", Token(TokenType.BOOLEAN, False)),
        ('"a b"', Token(TokenType.STRING, "a b")),
        ('""', Token(TokenType.STRING, "")),
        ("lambda", Token(TokenType.IDENTIFIER, "lambda")),
        ("(", Token(TokenType.LEFT_BRACKET)),
        (")", Token(TokenType.RIGHT_BRACKET)),
    ]
)
def test_token_values(source, expected):
    tokens = list(tokenize(source))
    assert tokens == [expected, EOF]


def test_number_then_identifier():
    assert texts("1abc") == ["1", "abc", "<EOF>"]


def test_whitespace_variants():
    assert texts("(a\r\n\tb)") == ["(", "a", "b", ")", "<EOF>"]


def test_comment_line_terminators():
    tokens = list(tokenize("; hi\r\n42"))
    assert tokens[0] == Token(TokenType.COMMENT, " hi")
    assert [t.text for t in tokens[1:]] == ["42", "<EOF>"]


def test_empty_comment_at_end():
    assert texts(";") == ["", "<EOF>"]


def test_empty_input_is_just_eof():
    assert list(tokenize("")) == [EOF]
    assert list(tokenize("  \n ")) == [EOF]


@pytest.mark.parametrize("source", ["1.2.3", "#x", "#", "@", "(a [b])", "(+ 1 ?)"])
def test_lex_errors(source):
    with pytest.raises(LexError):
        list(tokenize(source))


def test_lex_error_reports_position():
    with pytest.raises(LexError, match="at 3"):
        list(tokenize("(a @"))


def test_unterminated_string_runs_to_end():
    assert texts('(f "abc') == ["(", "f", "abc", "<EOF>"]


def test_unterminated_string_strict(monkeypatch):
    monkeypatch.setenv("SEVENLANG_STRICT_STRINGS", "1")
    with pytest.raises(LexError, match="Unterminated string"):
        list(tokenize('(f "abc'))


def test_lexer_is_lazy():
    tokens = tokenize("(a @")
    assert next(tokens).text == "("
    assert next(tokens).text == "a"
    with pytest.raises(LexError):
        next(tokens)


def test_lexer_reads_streams_and_closes_them():
    stream = io.StringIO("(list 1 2)")
    with Lexer(stream) as lexer:
        assert [t.text for t in lexer.tokens()] == ["(", "list", "1", "2", ")", "<EOF>"]
    assert stream.closed


@given(st.text(alphabet='()abc+-*/<=>! 0123456789.#tf";\n'))
def test_eof_exactly_once(source):
    try:
        tokens = list(tokenize(source))
    except LexError:
        return
    assert tokens[-1] == EOF
    assert tokens.count(EOF) == 1


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**6))
def test_number_tokens(whole, frac):
    source = f"{whole}.{frac}"
    [token, eof] = list(tokenize(source))
    assert token.type is TokenType.NUMBER
    assert token.value == float(source)
    assert eof == EOF


# -----------------------------------------------------
# Syntax tree
# -----------------------------------------------------

def test_nested_lists():
    stream = TokenStream(tokenize("(a (b c) 1) d"))
    result = list(stream.read_all())
    assert result == [
        SyntaxList([ident("a"), SyntaxList([ident("b"), ident("c")]), number(1)]),
        ident("d"),
    ]


def test_comments_are_skipped():
    stream = TokenStream(tokenize("; heading\n(a ; inline\n b)"))
    assert list(stream.read_all()) == [SyntaxList([ident("a"), ident("b")])]


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "No tokens"),
        ("; only a comment", "No tokens"),
        (")", "Unexpected '\\)'"),
        ("(+ 1 2", "Unmatched"),
        ("((a)", "Unmatched"),
    ]
)
def test_syntax_errors(source, message):
    with pytest.raises(ParseError, match=message):
        list(parse(tokenize(source)))


# -----------------------------------------------------
# Lowering
# -----------------------------------------------------

def parse_one(source):
    exprs = list(parse(tokenize(source)))
    assert len(exprs) == 1
    return exprs[0]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", NumberValue(42)),
        ("#t", BoolValue(True)),
        ('"hi"', StringValue("hi")),
        ("x", Variable("x")),
    ]
)
def test_lower_atoms(source, expected):
    assert parse_one(source) == expected


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "<", ">", "=", ">=", "<=", "!=", "and", "or", "not", "max", "min"])
def test_lower_builtin_operators(op):
    expr = parse_one(f"({op} 1 2)")
    assert isinstance(expr, BuiltinOp)
    assert expr.op == op
    assert expr.arguments == [NumberValue(1), NumberValue(2)]


def test_lower_special_forms():
    assert isinstance(parse_one("(define x 1)"), Define)
    assert isinstance(parse_one("(if #t 1 2)"), If)
    assert isinstance(parse_one("(list 1 2)"), ListForm)

    lam = parse_one("(lambda (a b) (+ a b))")
    assert isinstance(lam, Lambda)
    assert lam.parameters == ("a", "b")
    assert isinstance(lam.body, BuiltinOp)


def test_lower_map_procedure():
    by_op = parse_one("(map + (list 1) (list 2))")
    assert isinstance(by_op, MapForm)
    assert by_op.operator == "+"
    assert by_op.procedure is None

    by_lambda = parse_one("(map (lambda (x) x) (list 1))")
    assert by_lambda.operator is None
    assert isinstance(by_lambda.procedure, Lambda)

    by_name = parse_one("(map f xs)")
    assert by_name.procedure == Variable("f")
    assert by_name.lists == [Variable("xs")]


def test_lower_calls():
    named = parse_one("(inc 1)")
    assert isinstance(named, Call)
    assert named.callee == Variable("inc")
    assert named.arguments == [NumberValue(1)]

    immediate = parse_one("((lambda (n) n) 1)")
    assert isinstance(immediate, Call)
    assert isinstance(immediate.callee, Lambda)

    literal = parse_one("(1 2)")
    assert isinstance(literal, Call)
    assert literal.callee == NumberValue(1)


def test_string_head_is_not_a_keyword():
    expr = parse_one('("define" x 1)')
    assert isinstance(expr, Call)
    assert expr.callee == StringValue("define")


def test_multiple_top_level_forms():
    exprs = list(parse(tokenize("(define x 1)(+ x 1) 3")))
    assert [type(e) for e in exprs] == [Define, BuiltinOp, NumberValue]


def test_lowered_forms_render_as_source():
    source = "(define inc (lambda (n) (+ n 1)))"
    assert str(parse_one(source)) == source
    assert str(parse_one("(map + (list 1 2) xs)")) == "(map + (list 1 2) xs)"


@pytest.mark.parametrize(
    "source",
    [
        "()",
        "(lambda x x)",
        "(lambda (1) x)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(define 1 2)",
        "(define (f) 2)",
        "(define x)",
        "(if #t 1)",
        "(if #t 1 2 3)",
        "(map f)",
    ]
)
def test_malformed_special_forms(source):
    with pytest.raises(ParseError):
        list(parse(tokenize(source)))


def test_parse_is_lazy():
    exprs = parse(tokenize("(+ 1 2) )"))
    assert isinstance(next(exprs), BuiltinOp)
    with pytest.raises(ParseError):
        next(exprs)
