# Core type aliases for tzlang.
#
# The reader produces immutable AST nodes (tzlang.types.nodes) and the evaluator
# produces immutable runtime values (tzlang.types.values). The aliases below are
# used at the seams where either side is passed around without caring about the
# concrete variant.
#
# Naming guidance:
# - EvaluatorFn: the evaluator entry point handed to forms and the apply engine.
# - NativeCallback: a host function exposed to scripts as a NativeFunctionValue.

from typing import Any, Callable

EvaluatorFn = Callable[..., Any]

NativeCallback = Callable[[list], Any]

__version__ = "0.1.0"
