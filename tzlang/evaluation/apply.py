"""Application engine for tzlang.

Centralizes call semantics:
- Closures (FunctionValue) run their body in a new scope whose parent is the
  environment captured at definition time, so free variables resolve
  lexically, never against the caller's scope.
- Parameters are bound positionally. Missing trailing arguments bind null and
  surplus arguments are ignored; calls are not arity-checked.
- Native functions (NativeFunctionValue) receive the evaluated argument list.
"""

from __future__ import annotations

import logging

from tzlang import EvaluatorFn
from tzlang.errors import TzInternalError, TzNotCallable
from tzlang.evaluation.forms.block_forms import evaluate_statements
from tzlang.types.environment import Environment
from tzlang.types.nodes import CallExpression
from tzlang.types.values import (
    NULL,
    FunctionValue,
    NativeFunctionValue,
    RuntimeValue,
    type_name,
)

logger = logging.getLogger(__name__)


def apply_function(
    fn: FunctionValue,
    args: list[RuntimeValue],
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    call_env = Environment(parent=fn.env)
    for i, param in enumerate(fn.params):
        call_env.define(param.name, args[i] if i < len(args) else NULL)
    if len(args) > len(fn.params):
        logger.debug("ignoring %d surplus argument(s) to %s", len(args) - len(fn.params), fn)
    return evaluate_statements(fn.body, call_env, evaluate_fn)


def apply_native(fn: NativeFunctionValue, args: list[RuntimeValue]) -> RuntimeValue:
    logger.debug("calling native %s with %d argument(s)", fn.name, len(args))
    result = fn.callback(args)
    return NULL if result is None else result


def apply(
    callee: RuntimeValue,
    args: list[RuntimeValue],
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    """Apply a closure or a native function to already-evaluated arguments.

    `callee` must already be known to be callable; call_form checks it before
    evaluating the arguments.
    """
    match callee:
        case FunctionValue():
            return apply_function(callee, args, evaluate_fn)
        case NativeFunctionValue():
            return apply_native(callee, args)
    raise TzInternalError(f"apply reached with non-callable {type_name(callee)}")


def call_form(
    node: CallExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> RuntimeValue:
    callee = evaluate_fn(node.callee, env)
    if not isinstance(callee, (FunctionValue, NativeFunctionValue)):
        raise TzNotCallable(f"cannot call a value of type {type_name(callee)}")
    args = [evaluate_fn(arg, env) for arg in node.args]
    return apply(callee, args, evaluate_fn)
