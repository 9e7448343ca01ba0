from __future__ import annotations

import logging
import sys
from typing import TextIO

from tzlang import NativeCallback
from tzlang.builtins import register
from tzlang.errors import TzRecursionLimit
from tzlang.evaluation.evaluator import evaluate_program
from tzlang.reader.parser import Parser
from tzlang.types.environment import Environment
from tzlang.types.values import NativeFunctionValue, RuntimeValue

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs tzlang source against a persistent global environment.
    Bindings made by one `run` are visible to the next.
    """

    def __init__(self, stdout: TextIO | None = None, natives: bool = True):
        self.env = Environment()
        register(self.env, stdout=stdout, natives=natives)
        self.parser = Parser()

    def run(self, source: str) -> RuntimeValue:
        """Parse and evaluate `source`; returns the last top-level value (null if none)."""
        try:
            root = self.parser.parse(source)
            return evaluate_program(root, self.env)
        except RecursionError:
            raise TzRecursionLimit(
                f"maximum nesting depth exceeded (recursion limit {sys.getrecursionlimit()})"
            ) from None

    def define_native(self, name: str, callback: NativeCallback) -> NativeFunctionValue:
        """Expose a host callable to scripts as a constant global."""
        fn = NativeFunctionValue(callback, name)
        self.env.define(name, fn, constant=True)
        logger.debug("registered native %s", name)
        return fn
