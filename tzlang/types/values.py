"""Runtime values for tzlang.

Every evaluation step produces a new immutable value; the evaluator never
mutates numbers or booleans in place. RuntimeValue is the closed union of the
variants below and is matched exhaustively at each evaluation site.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

from tzlang.types.nodes import BlockStatement, Identifier

if TYPE_CHECKING:
    from tzlang.types.environment import Environment


@dataclass(frozen=True)
class NullValue:
    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class FloatValue:
    value: float

    def __str__(self) -> str:
        return format_float(self.value)


@dataclass(frozen=True)
class StringValue:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class FunctionValue:
    """A closure: parameters and body paired with the defining environment."""

    params: tuple[Identifier, ...]
    body: BlockStatement
    env: Environment = field(repr=False)

    def __str__(self) -> str:
        return f"<function({', '.join(p.name for p in self.params)})>"


@dataclass(frozen=True, eq=False)
class NativeFunctionValue:
    """A host function; `callback` receives the evaluated argument list."""

    callback: Callable[[list], object]
    name: str = "native"

    def __str__(self) -> str:
        return f"<native {self.name}>"


RuntimeValue = Union[
    NullValue,
    BooleanValue,
    FloatValue,
    StringValue,
    FunctionValue,
    NativeFunctionValue,
]

NULL = NullValue()
TRUE = BooleanValue(True)
FALSE = BooleanValue(False)

# integral floats at or above this magnitude print in exponent form
_INTEGRAL_DISPLAY_LIMIT = 1e16


def format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _INTEGRAL_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)


def format_value(value: RuntimeValue) -> str:
    """Canonical display text for a runtime value."""
    return str(value)


def type_name(value: RuntimeValue) -> str:
    """Short variant name used in error messages."""
    match value:
        case NullValue():
            return "Null"
        case BooleanValue():
            return "Boolean"
        case FloatValue():
            return "Float"
        case StringValue():
            return "String"
        case FunctionValue():
            return "Function"
        case NativeFunctionValue():
            return "NativeFunction"
    return type(value).__name__
