import pytest
from hypothesis import given, strategies as st

from tzlang.errors import TzInvalidNumber, TzUnexpectedCharacter, TzUnterminatedString, TzLexError
from tzlang.reader.lexer import Lexer, lex
from tzlang.reader.token import NumberClass, NumberEncoding, TokenKind


def _kinds_and_texts(source):
    return [(tok.kind, tok.text) for tok in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(TokenKind.Identifier, "a"), (TokenKind.Eof, "")]),
        ("_foo1 bar", [(TokenKind.Identifier, "_foo1"), (TokenKind.Identifier, "bar"), (TokenKind.Eof, "")]),
        ("let x = 1", [
            (TokenKind.Identifier, "let"),
            (TokenKind.Identifier, "x"),
            (TokenKind.Equal, "="),
            (TokenKind.NumericLiteral, "1"),
            (TokenKind.Eof, ""),
        ]),
        ("( ) { } [ ] , . : ;", [
            (TokenKind.OpenParen, "("),
            (TokenKind.CloseParen, ")"),
            (TokenKind.OpenCurly, "{"),
            (TokenKind.CloseCurly, "}"),
            (TokenKind.OpenBracket, "["),
            (TokenKind.CloseBracket, "]"),
            (TokenKind.Comma, ","),
            (TokenKind.Dot, "."),
            (TokenKind.Colon, ":"),
            (TokenKind.Semicolon, ";"),
            (TokenKind.Eof, ""),
        ]),
        ("= == => < <= > >= & && | ||", [
            (TokenKind.Equal, "="),
            (TokenKind.EqualEqual, "=="),
            (TokenKind.EqualGreaterThan, "=>"),
            (TokenKind.LessThan, "<"),
            (TokenKind.LessThanEqual, "<="),
            (TokenKind.GreaterThan, ">"),
            (TokenKind.GreaterThanEqual, ">="),
            (TokenKind.Ampersand, "&"),
            (TokenKind.AmpersandAmpersand, "&&"),
            (TokenKind.Bar, "|"),
            (TokenKind.BarBar, "||"),
            (TokenKind.Eof, ""),
        ]),
        ("a\n\tb\r\n", [
            (TokenKind.Identifier, "a"),
            (TokenKind.NewLine, "\n"),
            (TokenKind.Identifier, "b"),
            (TokenKind.NewLine, "\n"),
            (TokenKind.Eof, ""),
        ]),
        ("a==b", [(TokenKind.Identifier, "a"), (TokenKind.EqualEqual, "=="), (TokenKind.Identifier, "b"), (TokenKind.Eof, "")]),
        ("'single' \"double\" `back`", [
            (TokenKind.StringLiteral, "single"),
            (TokenKind.StringLiteral, "double"),
            (TokenKind.StringLiteral, "back"),
            (TokenKind.Eof, ""),
        ]),
        ("'it\"s'", [(TokenKind.StringLiteral, 'it"s'), (TokenKind.Eof, "")]),
        ("''", [(TokenKind.StringLiteral, ""), (TokenKind.Eof, "")]),
        ("", [(TokenKind.Eof, "")]),
    ],
)
def test_lexer_basic(source, expected):
    assert _kinds_and_texts(source) == expected


@pytest.mark.parametrize(
    "source,number_class,encoding",
    [
        ("0", NumberClass.Integer, NumberEncoding.Decimal),
        ("42", NumberClass.Integer, NumberEncoding.Decimal),
        ("3.14", NumberClass.Real, NumberEncoding.Decimal),
        ("0.5", NumberClass.Real, NumberEncoding.Decimal),
        ("1e10", NumberClass.Real, NumberEncoding.Scientific),
        ("2.5E-3", NumberClass.Real, NumberEncoding.Scientific),
        ("6e+2", NumberClass.Real, NumberEncoding.Scientific),
        ("0x1f1f", NumberClass.Integer, NumberEncoding.Hex),
        ("0xABCdef", NumberClass.Integer, NumberEncoding.Hex),
        ("0b1010", NumberClass.Integer, NumberEncoding.Binary),
    ],
)
def test_number_specialization(source, number_class, encoding):
    tok = Lexer(source).next_token()
    assert tok.kind is TokenKind.NumericLiteral
    assert tok.text == source
    assert tok.specialization.number_class is number_class
    assert tok.specialization.encoding is encoding


def test_dot_without_digits_ends_number():
    assert _kinds_and_texts("1.") == [(TokenKind.NumericLiteral, "1"), (TokenKind.Dot, "."), (TokenKind.Eof, "")]


@pytest.mark.parametrize("source", ["0x", "0xg", "0b", "0b2", "01", "007", "1e", "1e+", "3.5E-"])
def test_invalid_numbers(source):
    with pytest.raises(TzInvalidNumber) as info:
        list(lex(source))
    assert info.value.position == 0


@pytest.mark.parametrize("source", ["'abc", '"abc', "`abc", "x = 'oops\n"])
def test_unterminated_string(source):
    with pytest.raises(TzUnterminatedString):
        list(lex(source))


@pytest.mark.parametrize("source,char,position", [("@", "@", 0), ("a # b", "#", 2), ("1 + $", "$", 4), ("!x", "!", 0)])
def test_unexpected_character(source, char, position):
    with pytest.raises(TzUnexpectedCharacter) as info:
        list(lex(source))
    assert info.value.char == char
    assert info.value.position == position
    assert isinstance(info.value, TzLexError)


def test_operator_precedences():
    precedences = {tok.text: tok.precedence for tok in lex("= || && | & == < <= > >= + - * / =>")}
    assert precedences["="] < precedences["||"] < precedences["&&"] < precedences["|"] < precedences["&"]
    assert precedences["&"] < precedences["=="] < precedences["<"] < precedences["+"] < precedences["*"]
    assert precedences["<"] == precedences["<="] == precedences[">"] == precedences[">="]
    assert precedences["+"] == precedences["-"]
    assert precedences["*"] == precedences["/"]
    assert precedences["=>"] == 0


def test_non_operators_have_zero_precedence():
    assert all(tok.precedence == 0 for tok in lex("abc 12 'x' ( ) { } , ;\n"))


def test_eof_is_idempotent():
    lexer = Lexer("x")
    assert lexer.next_token().kind is TokenKind.Identifier
    assert not lexer.exhausted
    for _ in range(3):
        assert lexer.next_token().kind is TokenKind.Eof
    assert lexer.exhausted


def test_reset_rewinds_to_start():
    lexer = Lexer("a b")
    lexer.next_token()
    lexer.next_token()
    lexer.reset()
    assert lexer.next_token().text == "a"


def test_set_source_replaces_input():
    lexer = Lexer("a")
    lexer.set_source("b c")
    assert [tok.text for tok in lexer] == ["b", "c", ""]


def test_peek_does_not_advance():
    lexer = Lexer("ab")
    assert lexer.peek() == "a"
    assert lexer.peek(1) == "b"
    assert lexer.peek(2) is None
    assert lexer.index == 0


def test_token_positions():
    assert [tok.position for tok in lex("let x = 10")] == [0, 4, 6, 8, 10]


def test_lex_is_lazy():
    tokens = lex("a @")
    assert next(tokens).text == "a"
    with pytest.raises(TzUnexpectedCharacter):
        next(tokens)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.integers(min_value=0, max_value=2**64))
def test_decimal_integer_text_preserved(n):
    tok = Lexer(str(n)).next_token()
    assert tok.text == str(n)
    assert tok.specialization.encoding is NumberEncoding.Decimal


@given(st.integers(min_value=0, max_value=2**64))
def test_hex_and_binary_text_preserved(n):
    for text in (hex(n), bin(n)):
        tokens = list(lex(text))
        assert [t.kind for t in tokens] == [TokenKind.NumericLiteral, TokenKind.Eof]
        assert tokens[0].text == text


@given(st.text(alphabet="abcxyz_019 \t+-*/()=<>&|,;\n", max_size=40))
def test_lexer_no_crash_on_valid_alphabet(source):
    try:
        tokens = list(lex(source))
    except TzInvalidNumber:
        return  # e.g. "01"
    assert tokens[-1].kind is TokenKind.Eof
