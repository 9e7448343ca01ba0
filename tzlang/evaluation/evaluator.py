"""Core tree-walking evaluator for tzlang.

`evaluate` dispatches on the AST variant and delegates each construct to its
form in tzlang.evaluation.forms (or to the apply engine for calls). Errors are
never caught here; they propagate to whoever started the evaluation.
"""

from __future__ import annotations

import logging

from tzlang.errors import TzInternalError
from tzlang.evaluation.apply import call_form
from tzlang.evaluation.forms import (
    assign_form,
    binary_form,
    block_form,
    evaluate_statements,
    for_form,
    function_form,
    if_form,
    let_form,
    numeric_literal_form,
    unary_form,
)
from tzlang.types.environment import Environment
from tzlang.types.nodes import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    Expression,
    ForStatement,
    FunctionExpression,
    Identifier,
    IfStatement,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
    UnaryExpression,
    VariableDeclaration,
)
from tzlang.types.values import FALSE, NULL, TRUE, RuntimeValue, StringValue

logger = logging.getLogger(__name__)


def evaluate(node: Expression, env: Environment) -> RuntimeValue:
    """Evaluate `node` in `env` and return its runtime value."""
    match node:
        case Identifier(name=name):
            return env.lookup(name)
        case NumericLiteral():
            return numeric_literal_form(node, env, evaluate)
        case StringLiteral(text=text):
            return StringValue(text)
        case BooleanLiteral(value=value):
            return TRUE if value else FALSE
        case NullLiteral():
            return NULL
        case BinaryExpression():
            return binary_form(node, env, evaluate)
        case UnaryExpression():
            return unary_form(node, env, evaluate)
        case AssignmentExpression():
            return assign_form(node, env, evaluate)
        case VariableDeclaration():
            return let_form(node, env, evaluate)
        case CallExpression():
            return call_form(node, env, evaluate)
        case FunctionExpression():
            return function_form(node, env, evaluate)
        case BlockStatement():
            return block_form(node, env, evaluate)
        case IfStatement():
            return if_form(node, env, evaluate)
        case ForStatement():
            return for_form(node, env, evaluate)
        case _:
            raise TzInternalError(f"unsupported node: {node!r}")


def evaluate_program(root: BlockStatement, env: Environment) -> RuntimeValue:
    """Evaluate top-level statements directly in `env`.

    Unlike `evaluate(root, env)`, no child scope is created, so globals stay
    in the host's environment after the program finishes.
    """
    result = evaluate_statements(root, env, evaluate)
    logger.debug("program result: %s", result)
    return result
