from __future__ import annotations

from tzlang import EvaluatorFn
from tzlang.errors import TzInvalidAssignmentTarget
from tzlang.types.environment import Environment
from tzlang.types.nodes import AssignmentExpression, FunctionExpression, Identifier, VariableDeclaration
from tzlang.types.values import NULL, FunctionValue, RuntimeValue


def let_form(
    node: VariableDeclaration,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """
    let name [= value]
    Defines in the current scope; a missing initializer binds null.
    """
    value = NULL if node.initializer is None else evaluate_fn(node.initializer, env)
    return env.define(node.name, value)


def assign_form(
    node: AssignmentExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    target = node.target
    if not isinstance(target, Identifier):
        raise TzInvalidAssignmentTarget(
            f"cannot assign to {target.kind.value}, only to a variable name"
        )
    value = evaluate_fn(node.value, env)
    return env.assign(target.name, value)


def function_form(
    node: FunctionExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    # closes over the defining scope
    return FunctionValue(node.params, node.body, env)
