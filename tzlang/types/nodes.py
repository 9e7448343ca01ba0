"""AST node variants produced by the parser and consumed by the evaluator.

The set of variants is closed: NodeKind enumerates them once, and every node
class pins its own `kind`. Nodes are frozen dataclasses and ordered children
are tuples, so a tree cannot be mutated after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union

from tzlang.reader.token import Token


class NodeKind(Enum):
    Identifier = "Identifier"
    NumericLiteral = "NumericLiteral"
    StringLiteral = "StringLiteral"
    BooleanLiteral = "BooleanLiteral"
    NullLiteral = "NullLiteral"
    BinaryExpression = "BinaryExpression"
    UnaryExpression = "UnaryExpression"
    AssignmentExpression = "AssignmentExpression"
    VariableDeclaration = "VariableDeclaration"
    CallExpression = "CallExpression"
    FunctionExpression = "FunctionExpression"
    BlockStatement = "BlockStatement"
    IfStatement = "IfStatement"
    ForStatement = "ForStatement"


class Node:
    __slots__ = ()
    kind: ClassVar[NodeKind]


@dataclass(frozen=True)
class Identifier(Node):
    kind: ClassVar[NodeKind] = NodeKind.Identifier
    name: str


@dataclass(frozen=True)
class NumericLiteral(Node):
    """Raw literal text plus the lexer's specialization (base, integer/real)."""

    kind: ClassVar[NodeKind] = NodeKind.NumericLiteral
    text: str
    token: Optional[Token] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class StringLiteral(Node):
    kind: ClassVar[NodeKind] = NodeKind.StringLiteral
    text: str


@dataclass(frozen=True)
class BooleanLiteral(Node):
    kind: ClassVar[NodeKind] = NodeKind.BooleanLiteral
    value: bool


@dataclass(frozen=True)
class NullLiteral(Node):
    kind: ClassVar[NodeKind] = NodeKind.NullLiteral


@dataclass(frozen=True)
class BinaryExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.BinaryExpression
    operator: Token
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.UnaryExpression
    operator: Token
    operand: Expression


@dataclass(frozen=True)
class AssignmentExpression(Node):
    # target is validated by the evaluator, so any expression may appear here
    kind: ClassVar[NodeKind] = NodeKind.AssignmentExpression
    target: Expression
    value: Expression


@dataclass(frozen=True)
class VariableDeclaration(Node):
    kind: ClassVar[NodeKind] = NodeKind.VariableDeclaration
    name: str
    initializer: Optional[Expression] = None


@dataclass(frozen=True)
class CallExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.CallExpression
    callee: Expression
    args: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class BlockStatement(Node):
    kind: ClassVar[NodeKind] = NodeKind.BlockStatement
    statements: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class FunctionExpression(Node):
    kind: ClassVar[NodeKind] = NodeKind.FunctionExpression
    params: tuple[Identifier, ...]
    body: BlockStatement


@dataclass(frozen=True)
class IfStatement(Node):
    kind: ClassVar[NodeKind] = NodeKind.IfStatement
    condition: Expression
    then_branch: Expression
    else_branch: Optional[Expression] = None


@dataclass(frozen=True)
class ForStatement(Node):
    """Pre-test loop: `for (condition) body`."""

    kind: ClassVar[NodeKind] = NodeKind.ForStatement
    condition: Expression
    body: Expression


Expression = Union[
    Identifier,
    NumericLiteral,
    StringLiteral,
    BooleanLiteral,
    NullLiteral,
    BinaryExpression,
    UnaryExpression,
    AssignmentExpression,
    VariableDeclaration,
    CallExpression,
    FunctionExpression,
    BlockStatement,
    IfStatement,
    ForStatement,
]
