"""
  tzlang Lexer

- Single-character lookahead scanner over an in-memory source string
- Lazy: tokens are produced one at a time by `next_token`, or streamed by
  iterating the lexer / calling `lex(source)`
- Newlines are significant (statement separators) and produce NewLine tokens;
  spaces, tabs and carriage returns are skipped
- Keywords are not distinguished here: `let`, `if`, ... are Identifier tokens
  recognized by the parser through their text
- Numeric literals keep their raw text; the evaluator interprets them using
  the Specialization recorded on the token
"""

from __future__ import annotations

import string
from typing import Iterator, Optional

from tzlang.errors import TzInvalidNumber, TzUnexpectedCharacter, TzUnterminatedString
from tzlang.reader.token import (
    PRECEDENCE,
    NumberClass,
    NumberEncoding,
    Specialization,
    Token,
    TokenKind,
)

WHITESPACE = frozenset(" \t\r")
DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)
BINARY_DIGITS = frozenset("01")
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS
STRING_TERMINATORS = frozenset("\"'`")

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.OpenParen,
    ")": TokenKind.CloseParen,
    "{": TokenKind.OpenCurly,
    "}": TokenKind.CloseCurly,
    "[": TokenKind.OpenBracket,
    "]": TokenKind.CloseBracket,
    ",": TokenKind.Comma,
    ".": TokenKind.Dot,
    ":": TokenKind.Colon,
    ";": TokenKind.Semicolon,
    "+": TokenKind.Plus,
    "-": TokenKind.Minus,
    "*": TokenKind.Asterisk,
    "/": TokenKind.Slash,
    "=": TokenKind.Equal,
    "<": TokenKind.LessThan,
    ">": TokenKind.GreaterThan,
    "&": TokenKind.Ampersand,
    "|": TokenKind.Bar,
    "\n": TokenKind.NewLine,
}

# first char -> candidate second chars, tried in order
DOUBLE_CHAR_TOKENS: dict[str, tuple[tuple[str, TokenKind], ...]] = {
    "=": (("=", TokenKind.EqualEqual), (">", TokenKind.EqualGreaterThan)),
    "&": (("&", TokenKind.AmpersandAmpersand),),
    "|": (("|", TokenKind.BarBar),),
    "<": (("=", TokenKind.LessThanEqual),),
    ">": (("=", TokenKind.GreaterThanEqual),),
}


class Lexer:
    def __init__(self, source: str = ""):
        self.source: str = ""
        self.size: int = 0
        self.index: int = 0
        self.char: Optional[str] = None
        self.exhausted: bool = False
        self.set_source(source)

    def set_source(self, source: str) -> None:
        self.source = source
        self.size = len(source)
        self.reset()

    def reset(self) -> None:
        """Rewind to the start of the current source."""
        self.index = 0
        self.char = self.source[0] if self.size else None
        self.exhausted = False

    # -------------------------------
    # Cursor
    # -------------------------------
    def advance(self) -> None:
        if self.index < self.size:
            self.index += 1
            self.char = self.source[self.index] if self.index < self.size else None

    def peek(self, offset: int = 0) -> Optional[str]:
        pos = self.index + offset
        if 0 <= pos < self.size:
            return self.source[pos]
        return None

    def checked_peek(self, offset: int, char: str) -> bool:
        return self.peek(offset) == char

    def skip_whitespace(self) -> None:
        while self.char is not None and self.char in WHITESPACE:
            self.advance()

    @staticmethod
    def token(
        kind: TokenKind,
        text: str,
        position: int,
        specialization: Optional[Specialization] = None,
    ) -> Token:
        return Token(kind, text, PRECEDENCE.get(kind, 0), specialization, position)

    # -------------------------------
    # Scanning
    # -------------------------------
    def next_token(self) -> Token:
        """Return the next token; at end of input, every call returns Eof."""
        self.skip_whitespace()
        start = self.index
        char = self.char

        if char is None:
            self.exhausted = True
            return self.token(TokenKind.Eof, "", start)

        if char in STRING_TERMINATORS:
            return self.lex_string()

        if char in IDENTIFIER_START:
            return self.lex_identifier()

        if char in DIGITS:
            return self.lex_number()

        for second, kind in DOUBLE_CHAR_TOKENS.get(char, ()):
            if self.checked_peek(1, second):
                self.advance()
                self.advance()
                return self.token(kind, char + second, start)

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is None:
            raise TzUnexpectedCharacter(char, start)
        self.advance()
        return self.token(kind, char, start)

    def lex_identifier(self) -> Token:
        start = self.index
        while self.char is not None and self.char in IDENTIFIER_CHARS:
            self.advance()
        return self.token(TokenKind.Identifier, self.source[start:self.index], start)

    def lex_string(self) -> Token:
        start = self.index
        terminator = self.char
        self.advance()
        body_start = self.index
        while self.char is not None and self.char != terminator:
            self.advance()
        if self.char is None:
            raise TzUnterminatedString("unterminated string", start)
        text = self.source[body_start:self.index]
        self.advance()  # closing quote
        return self.token(TokenKind.StringLiteral, text, start)

    def lex_number(self) -> Token:
        start = self.index

        if self.char == "0":
            following = self.peek(1)
            if following == "x":
                return self.lex_radix(HEX_DIGITS, NumberEncoding.Hex)
            if following == "b":
                return self.lex_radix(BINARY_DIGITS, NumberEncoding.Binary)
            if following is not None and following in DIGITS:
                raise TzInvalidNumber("invalid number: leading zero", start)

        self._consume_digits()
        number_class = NumberClass.Integer
        encoding = NumberEncoding.Decimal

        # a dot only belongs to the literal when a digit follows it
        if self.char == "." and self.peek(1) in DIGITS:
            number_class = NumberClass.Real
            self.advance()
            self._consume_digits()

        if self.char in ("e", "E"):
            number_class = NumberClass.Real
            encoding = NumberEncoding.Scientific
            self.advance()
            if self.char in ("+", "-"):
                self.advance()
            if self.char is None or self.char not in DIGITS:
                raise TzInvalidNumber("invalid number: missing exponent digits", start)
            self._consume_digits()

        return self.token(
            TokenKind.NumericLiteral,
            self.source[start:self.index],
            start,
            Specialization(number_class, encoding),
        )

    def lex_radix(self, digits: frozenset, encoding: NumberEncoding) -> Token:
        start = self.index
        self.advance()  # 0
        self.advance()  # x / b
        if self.char is None or self.char not in digits:
            raise TzInvalidNumber(
                f"invalid number: expected a digit after {self.source[start:self.index]!r}",
                start,
            )
        while self.char is not None and self.char in digits:
            self.advance()
        return self.token(
            TokenKind.NumericLiteral,
            self.source[start:self.index],
            start,
            Specialization(NumberClass.Integer, encoding),
        )

    def _consume_digits(self) -> None:
        while self.char is not None and self.char in DIGITS:
            self.advance()

    def __iter__(self) -> Iterator[Token]:
        """Stream tokens up to and including the first Eof."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.Eof:
                return

    def __repr__(self) -> str:
        return f"<Lexer index={self.index} size={self.size} exhausted={self.exhausted}>"


def lex(source: str) -> Iterator[Token]:
    """Token generator over a fresh Lexer for `source`."""
    return iter(Lexer(source))
