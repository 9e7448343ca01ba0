from __future__ import annotations

from tzlang import EvaluatorFn
from tzlang.errors import TzTypeError
from tzlang.evaluation.forms.block_forms import scoped_form
from tzlang.types.environment import Environment
from tzlang.types.nodes import ForStatement, IfStatement
from tzlang.types.values import NULL, BooleanValue, RuntimeValue, type_name


def truth(value: RuntimeValue) -> bool:
    # no truthiness: only Boolean values are valid conditions
    match value:
        case BooleanValue(value=flag):
            return flag
    raise TzTypeError(f"condition must be boolean, got {type_name(value)}")


def if_form(
    node: IfStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    if truth(evaluate_fn(node.condition, env)):
        return scoped_form(node.then_branch, env, evaluate_fn)
    if node.else_branch is not None:
        return scoped_form(node.else_branch, env, evaluate_fn)
    return NULL


def for_form(
    node: ForStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """Pre-test loop.

    The condition is re-evaluated in a fresh child scope before every
    iteration and each iteration's body gets its own scope, so bindings made
    by one iteration are gone by the next. The value is that of the last
    body evaluation, or null when the body never ran.
    """
    result: RuntimeValue = NULL
    while truth(evaluate_fn(node.condition, Environment(parent=env))):
        result = scoped_form(node.body, env, evaluate_fn)
    return result
