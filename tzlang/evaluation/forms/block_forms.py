"""Scope-creating forms: blocks, branch/iteration bodies, program bodies."""

from __future__ import annotations

from tzlang import EvaluatorFn
from tzlang.types.environment import Environment
from tzlang.types.nodes import BlockStatement, Expression
from tzlang.types.values import NULL, RuntimeValue


def evaluate_statements(
    block: BlockStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """Evaluate the block's statements directly in `env`; the last value wins."""
    result: RuntimeValue = NULL
    for statement in block.statements:
        result = evaluate_fn(statement, env)
    return result


def block_form(
    node: BlockStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    return evaluate_statements(node, Environment(parent=env), evaluate_fn)


def scoped_form(
    node: Expression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """Evaluate a branch or loop body in its own child scope of `env`.

    A block body runs its statements directly in that scope, so a `{ ... }`
    body and a single-statement body see the same scoping.
    """
    scope = Environment(parent=env)
    if isinstance(node, BlockStatement):
        return evaluate_statements(node, scope, evaluate_fn)
    return evaluate_fn(node, scope)
