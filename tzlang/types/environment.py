"""Runtime environment for tzlang.

An Environment maps names to runtime values for one lexical scope and links to
the scope it was created in through `parent`. Lookups walk the chain outward;
definitions always land in the scope they are made in. Names can be marked
constant when defined, which makes later assignment fail.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tzlang.errors import TzAlreadyDefined, TzConstantViolation, TzUndefinedVariable
from tzlang.types.values import RuntimeValue


class Environment:
    """Chained lexical scope."""

    __slots__ = ("vars", "constants", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.vars: dict[str, RuntimeValue] = {}
        self.constants: set[str] = set()
        self.parent: Environment | None = parent

    def define(self, name: str, value: RuntimeValue, constant: bool = False) -> RuntimeValue:
        """Bind `name` in this scope.

        Shadowing a binding of an enclosing scope is allowed; redefining a name
        in the same scope raises TzAlreadyDefined.
        """
        if name in self.vars:
            raise TzAlreadyDefined(name)
        self.vars[name] = value
        if constant:
            self.constants.add(name)
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def assign(self, name: str, value: RuntimeValue) -> RuntimeValue:
        """Update an existing binding in the scope that defined it.

        Raises TzConstantViolation if `name` is constant in any scope of the
        chain, shadowed or not, and TzUndefinedVariable if no scope binds it.
        """
        env = self.find(name)
        if env is None:
            raise TzUndefinedVariable(name)
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope.constants:
                raise TzConstantViolation(name)
            scope = scope.parent
        env.vars[name] = value
        return value

    def lookup(self, name: str) -> RuntimeValue:
        env = self.find(name)
        if env is None:
            raise TzUndefinedVariable(name)
        return env.vars[name]

    resolve = lookup

    def has(self, name: str) -> bool:
        """True if `name` is bound in this scope (parents are not consulted)."""
        return name in self.vars

    def is_constant(self, name: str) -> bool:
        return name in self.constants

    def reset(self) -> None:
        """Drop every binding of this scope."""
        self.vars.clear()
        self.constants.clear()

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            marker = "const " if k in self.constants else ""
            buffer.write(f"{marker}{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.parent
        return f"<Environment chain: {' -> '.join(chain)}>"
