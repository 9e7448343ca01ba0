"""
  tzlang Parser

Single-pass Pratt parser with one token of lookahead (`self.token`), refilled
from the Lexer on every `advance`.

- fud: statement-level dispatch on the leading identifier (`let`, `if`, `for`)
  or on `{` for a nested block
- nud: prefix / primary expressions (identifiers, literals, grouping,
  `(params) => { ... }` functions, unary `-`/`+`), followed by call suffixes
- led: infix operators, using the precedence the lexer stored on the token

Binary operators associate to the left; assignment associates to the right by
parsing its right-hand side at ASSIGNMENT_PRECEDENCE - 1.

The first error aborts the parse with TzSyntaxError (or a TzLexError raised by
the lexer); there is no recovery.
"""

from __future__ import annotations

import logging
from typing import Optional

from tzlang.errors import TzSyntaxError
from tzlang.reader.lexer import Lexer
from tzlang.reader.token import ASSIGNMENT_PRECEDENCE, PREFIX_PRECEDENCE, Token, TokenKind
from tzlang.types.nodes import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    Expression,
    ForStatement,
    FunctionExpression,
    Identifier,
    IfStatement,
    NumericLiteral,
    StringLiteral,
    UnaryExpression,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)

SEPARATORS = (TokenKind.NewLine, TokenKind.Semicolon)

BINARY_OPERATORS = frozenset(
    {
        TokenKind.Plus,
        TokenKind.Minus,
        TokenKind.Asterisk,
        TokenKind.Slash,
        TokenKind.LessThan,
        TokenKind.LessThanEqual,
        TokenKind.GreaterThan,
        TokenKind.GreaterThanEqual,
        TokenKind.EqualEqual,
        TokenKind.Ampersand,
        TokenKind.AmpersandAmpersand,
        TokenKind.Bar,
        TokenKind.BarBar,
    }
)

PREFIX_OPERATORS = frozenset({TokenKind.Minus, TokenKind.Plus})

RESERVED_WORDS = frozenset({"let", "if", "else", "for", "return"})


class Parser:
    def __init__(self):
        self.lexer = Lexer()
        self.token: Token = Token(TokenKind.Eof, "")

    def __repr__(self) -> str:
        return f"<Parser lexer={self.lexer!r} token={self.token}>"

    # -------------------------------
    # Token plumbing
    # -------------------------------
    def reset(self) -> None:
        self.lexer.reset()
        self.advance()

    def advance(self) -> None:
        self.token = self.lexer.next_token()

    def eat(self, kind: TokenKind) -> Token:
        """Consume the current token, which must be of `kind`."""
        token = self.token
        if token.kind is not kind:
            raise TzSyntaxError(token, kind)
        self.advance()
        return token

    def skip(self, *kinds: TokenKind) -> None:
        while self.token.kind in kinds:
            self.advance()

    def expect_keyword(self, word: str) -> Token:
        token = self.token
        if not token.is_keyword(word):
            raise TzSyntaxError(token, f"'{word}'")
        self.advance()
        return token

    # -------------------------------
    # Entry points
    # -------------------------------
    def parse(self, source: str) -> BlockStatement:
        """Parse a whole program into its root (global) BlockStatement."""
        self.lexer.set_source(source)
        self.reset()
        root = self.parse_block_statement(is_global=True)
        logger.debug("parsed %d top-level statement(s)", len(root.statements))
        return root

    def parse_block_statement(self, is_global: bool = False) -> BlockStatement:
        """Parse `{ stmt* }`, or the brace-less global block ending at Eof."""
        end = TokenKind.Eof if is_global else TokenKind.CloseCurly
        if not is_global:
            self.eat(TokenKind.OpenCurly)

        statements: list[Expression] = []
        self.skip(*SEPARATORS)
        while self.token.kind is not end:
            statements.append(self.parse_statement())
            if self.token.kind is end:
                break
            if self.token.kind not in SEPARATORS:
                raise TzSyntaxError(self.token, "newline or ';' between statements")
            self.skip(*SEPARATORS)

        if not is_global:
            self.eat(TokenKind.CloseCurly)
        return BlockStatement(tuple(statements))

    def parse_statement(self) -> Expression:
        statement = self.fud()
        if statement is not None:
            return statement
        return self.parse_expression()

    def parse_expression(self, min_precedence: int = 0) -> Expression:
        left = self.nud()
        while min_precedence < self.token.precedence:
            left = self.led(left)
        return left

    # -------------------------------
    # Statements
    # -------------------------------
    def fud(self) -> Optional[Expression]:
        token = self.token
        if token.kind is TokenKind.OpenCurly:
            return self.parse_block_statement()
        if token.kind is not TokenKind.Identifier:
            return None
        match token.text:
            case "let":
                return self.parse_variable_declaration()
            case "if":
                return self.parse_if_statement()
            case "for":
                return self.parse_for_statement()
            case "return":
                raise TzSyntaxError(token, "a statement ('return' is not supported)")
            case "else":
                raise TzSyntaxError(token, "a statement ('else' without 'if')")
        return None

    def parse_variable_declaration(self) -> VariableDeclaration:
        self.expect_keyword("let")
        name = self.eat(TokenKind.Identifier)
        if name.text in RESERVED_WORDS:
            raise TzSyntaxError(name, "a variable name")
        initializer = None
        if self.token.kind is TokenKind.Equal:
            self.advance()
            initializer = self.parse_expression(ASSIGNMENT_PRECEDENCE - 1)
        return VariableDeclaration(name.text, initializer)

    def parse_condition(self) -> Expression:
        self.eat(TokenKind.OpenParen)
        self.skip(TokenKind.NewLine)
        condition = self.parse_expression()
        self.skip(TokenKind.NewLine)
        self.eat(TokenKind.CloseParen)
        return condition

    def parse_branch(self) -> Expression:
        """A `{`-block, or else exactly one statement."""
        if self.token.kind is TokenKind.OpenCurly:
            return self.parse_block_statement()
        return self.parse_statement()

    def parse_if_statement(self) -> IfStatement:
        self.expect_keyword("if")
        condition = self.parse_condition()
        then_branch = self.parse_branch()
        else_branch = None
        if self.token.is_keyword("else"):
            self.advance()
            else_branch = self.parse_branch()
        return IfStatement(condition, then_branch, else_branch)

    def parse_for_statement(self) -> ForStatement:
        self.expect_keyword("for")
        condition = self.parse_condition()
        return ForStatement(condition, self.parse_branch())

    # -------------------------------
    # Expressions
    # -------------------------------
    def nud(self) -> Expression:
        token = self.token
        match token.kind:
            case TokenKind.Identifier:
                if token.text in RESERVED_WORDS:
                    raise TzSyntaxError(token, "an expression")
                self.advance()
                return self.parse_call_suffix(Identifier(token.text))
            case TokenKind.NumericLiteral:
                self.advance()
                return self.parse_call_suffix(NumericLiteral(token.text, token))
            case TokenKind.StringLiteral:
                self.advance()
                return self.parse_call_suffix(StringLiteral(token.text))
            case TokenKind.OpenParen:
                return self.parse_call_suffix(self.parse_parenthesized())
            case kind if kind in PREFIX_OPERATORS:
                self.advance()
                return UnaryExpression(token, self.parse_expression(PREFIX_PRECEDENCE))
        raise TzSyntaxError(token, "an expression")

    def led(self, left: Expression) -> Expression:
        token = self.token
        if token.kind is TokenKind.Equal:
            self.advance()
            return AssignmentExpression(left, self.parse_expression(ASSIGNMENT_PRECEDENCE - 1))
        if token.kind in BINARY_OPERATORS:
            self.advance()
            return BinaryExpression(token, left, self.parse_expression(token.precedence))
        raise TzSyntaxError(token, "an operator")

    def parse_parenthesized(self) -> Expression:
        """Grouping `(expr)`, or the parameter list of `(a, b) => { ... }`."""
        items = self.parse_parenthesized_list()
        if self.token.kind is TokenKind.EqualGreaterThan:
            return self.parse_function_rest(items)
        if len(items) != 1:
            raise TzSyntaxError(self.token, TokenKind.EqualGreaterThan)
        return items[0]

    def parse_function_rest(self, items: list[Expression]) -> FunctionExpression:
        arrow = self.eat(TokenKind.EqualGreaterThan)
        params: list[Identifier] = []
        for item in items:
            if not isinstance(item, Identifier):
                raise TzSyntaxError(arrow, "parameter names before '=>'")
            params.append(item)
        return FunctionExpression(tuple(params), self.parse_block_statement())

    def parse_call_suffix(self, callee: Expression) -> Expression:
        while self.token.kind is TokenKind.OpenParen:
            callee = CallExpression(callee, self.parse_arguments())
        return callee

    def parse_arguments(self) -> tuple[Expression, ...]:
        return tuple(self.parse_parenthesized_list())

    def parse_parenthesized_list(self) -> list[Expression]:
        """`(e1, e2, ...)`; newlines inside the parentheses are ignored."""
        self.eat(TokenKind.OpenParen)
        self.skip(TokenKind.NewLine)
        items: list[Expression] = []
        while self.token.kind is not TokenKind.CloseParen:
            items.append(self.parse_expression())
            self.skip(TokenKind.NewLine)
            if self.token.kind is not TokenKind.Comma:
                break
            self.advance()
            self.skip(TokenKind.NewLine)
            if self.token.kind is TokenKind.CloseParen:
                raise TzSyntaxError(self.token, "an expression after ','")
        self.eat(TokenKind.CloseParen)
        return items


def parse(source: str) -> BlockStatement:
    return Parser().parse(source)
