"""Global bootstrap for the tzlang runtime environment.

Defines the constants every program can rely on (`null`, `true`, `false`) and,
optionally, the host-facing `print` native.
"""
from __future__ import annotations

import sys
from typing import TextIO

from tzlang.types.environment import Environment
from tzlang.types.values import (
    FALSE,
    NULL,
    TRUE,
    NativeFunctionValue,
    RuntimeValue,
    format_value,
)

CONSTANTS: dict[str, RuntimeValue] = {
    "null": NULL,
    "true": TRUE,
    "false": FALSE,
}


def make_print(stdout: TextIO | None = None) -> NativeFunctionValue:
    """Native `print`: writes its arguments space-separated, returns null."""

    def _print(args: list[RuntimeValue]) -> RuntimeValue:
        out = stdout if stdout is not None else sys.stdout
        out.write(" ".join(format_value(arg) for arg in args) + "\n")
        return NULL

    return NativeFunctionValue(_print, "print")


def register(env: Environment, stdout: TextIO | None = None, natives: bool = True) -> Environment:
    """Populate a global environment. All names are defined as constants."""
    for name, value in CONSTANTS.items():
        env.define(name, value, constant=True)
    if natives:
        env.define("print", make_print(stdout), constant=True)
    return env
