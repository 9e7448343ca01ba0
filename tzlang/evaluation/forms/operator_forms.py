"""Unary and binary operator evaluation.

Both operands of a binary expression are always evaluated, left first, before
the operator is looked at. `&&` and `||` therefore never short-circuit, and
together with `==`, `&` and `|` they are parsed but have no evaluation rule:
they fail with TzUnsupported.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from tzlang import EvaluatorFn
from tzlang.errors import TzInternalError, TzTypeError, TzUnsupported
from tzlang.reader.token import TokenKind
from tzlang.types.environment import Environment
from tzlang.types.nodes import BinaryExpression, UnaryExpression
from tzlang.types.values import FALSE, TRUE, FloatValue, RuntimeValue, type_name


def divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


ARITHMETIC: dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.Plus: operator.add,
    TokenKind.Minus: operator.sub,
    TokenKind.Asterisk: operator.mul,
    TokenKind.Slash: divide,
}

COMPARISON: dict[TokenKind, Callable[[float, float], bool]] = {
    TokenKind.LessThan: operator.lt,
    TokenKind.LessThanEqual: operator.le,
    TokenKind.GreaterThan: operator.gt,
    TokenKind.GreaterThanEqual: operator.ge,
}

UNSUPPORTED = frozenset(
    {
        TokenKind.EqualEqual,
        TokenKind.AmpersandAmpersand,
        TokenKind.BarBar,
        TokenKind.Ampersand,
        TokenKind.Bar,
    }
)

NEGATION: dict[TokenKind, Callable[[float], float]] = {
    TokenKind.Minus: operator.neg,
    TokenKind.Plus: operator.pos,
}


def binary_form(
    node: BinaryExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    left = evaluate_fn(node.left, env)
    right = evaluate_fn(node.right, env)
    kind = node.operator.kind
    symbol = node.operator.text

    if kind in UNSUPPORTED:
        raise TzUnsupported(
            f"operator '{symbol}' is not supported for {type_name(left)} and {type_name(right)}"
        )

    match left, right:
        case FloatValue(value=a), FloatValue(value=b):
            if kind in ARITHMETIC:
                return FloatValue(ARITHMETIC[kind](a, b))
            if kind in COMPARISON:
                return TRUE if COMPARISON[kind](a, b) else FALSE

    if kind in ARITHMETIC or kind in COMPARISON:
        raise TzTypeError(
            f"operator '{symbol}' requires Float operands, got {type_name(left)} and {type_name(right)}"
        )
    raise TzInternalError(f"unknown binary operator {kind.name}")


def unary_form(
    node: UnaryExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    operand = evaluate_fn(node.operand, env)
    fn = NEGATION.get(node.operator.kind)
    if fn is None:
        raise TzInternalError(f"unknown unary operator {node.operator.kind.name}")
    match operand:
        case FloatValue(value=a):
            return FloatValue(fn(a))
    raise TzTypeError(
        f"operator '{node.operator.text}' requires a Float operand, got {type_name(operand)}"
    )
