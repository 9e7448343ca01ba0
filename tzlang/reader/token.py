"""Token model for the tzlang reader.

Tokens are immutable values produced one at a time by the Lexer. Operator
tokens carry their binding precedence so the parser never consults a separate
precedence table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    Identifier = "identifier"
    NumericLiteral = "number"
    StringLiteral = "string"

    OpenParen = "("
    CloseParen = ")"
    OpenCurly = "{"
    CloseCurly = "}"
    OpenBracket = "["
    CloseBracket = "]"

    Comma = ","
    Dot = "."
    Colon = ":"
    Semicolon = ";"

    Plus = "+"
    Minus = "-"
    Asterisk = "*"
    Slash = "/"
    Equal = "="
    EqualEqual = "=="
    EqualGreaterThan = "=>"
    LessThan = "<"
    LessThanEqual = "<="
    GreaterThan = ">"
    GreaterThanEqual = ">="
    Ampersand = "&"
    AmpersandAmpersand = "&&"
    Bar = "|"
    BarBar = "||"

    NewLine = "newline"
    Eof = "eof"


class NumberClass(Enum):
    Integer = "integer"
    Real = "real"


class NumberEncoding(Enum):
    Decimal = "decimal"
    Hex = "hex"
    Binary = "binary"
    Scientific = "scientific"


# Binding precedences, lowest first.
ASSIGNMENT_PRECEDENCE = 1
LOGICAL_OR_PRECEDENCE = 4
LOGICAL_AND_PRECEDENCE = 5
BITWISE_OR_PRECEDENCE = 6
BITWISE_AND_PRECEDENCE = 7
EQUALITY_PRECEDENCE = 8
COMPARISON_PRECEDENCE = 9
ADDITIVE_PRECEDENCE = 10
MULTIPLICATIVE_PRECEDENCE = 20
PREFIX_PRECEDENCE = 30

PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.Equal: ASSIGNMENT_PRECEDENCE,
    TokenKind.BarBar: LOGICAL_OR_PRECEDENCE,
    TokenKind.AmpersandAmpersand: LOGICAL_AND_PRECEDENCE,
    TokenKind.Bar: BITWISE_OR_PRECEDENCE,
    TokenKind.Ampersand: BITWISE_AND_PRECEDENCE,
    TokenKind.EqualEqual: EQUALITY_PRECEDENCE,
    TokenKind.LessThan: COMPARISON_PRECEDENCE,
    TokenKind.LessThanEqual: COMPARISON_PRECEDENCE,
    TokenKind.GreaterThan: COMPARISON_PRECEDENCE,
    TokenKind.GreaterThanEqual: COMPARISON_PRECEDENCE,
    TokenKind.Plus: ADDITIVE_PRECEDENCE,
    TokenKind.Minus: ADDITIVE_PRECEDENCE,
    TokenKind.Asterisk: MULTIPLICATIVE_PRECEDENCE,
    TokenKind.Slash: MULTIPLICATIVE_PRECEDENCE,
}


@dataclass(frozen=True)
class Specialization:
    """Numeric literal details recorded by the lexer for the evaluator."""

    number_class: NumberClass
    encoding: NumberEncoding

    @property
    def base(self) -> int:
        if self.encoding is NumberEncoding.Hex:
            return 16
        if self.encoding is NumberEncoding.Binary:
            return 2
        return 10


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    precedence: int = 0
    specialization: Optional[Specialization] = None
    position: int = 0

    def is_keyword(self, text: str) -> bool:
        return self.kind is TokenKind.Identifier and self.text == text

    def __str__(self) -> str:
        text = self.text.replace("\n", "\\n").replace("\t", "\\t")
        if self.specialization is not None:
            return (
                f"<Token text='{text}' kind='{self.kind.name}' "
                f"specialization='{self.specialization.number_class.name}/"
                f"{self.specialization.encoding.name}'>"
            )
        return f"<Token text='{text}' kind='{self.kind.name}'>"
