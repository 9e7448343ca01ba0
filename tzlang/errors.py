from __future__ import annotations

from typing import Any


class TzError(Exception):
    """ Base class for all tzlang errors"""
    pass


class TzInternalError(Exception):
    """ Raised on interpreter bugs, e.g. an AST node the evaluator cannot dispatch"""


class TzLoadError(TzError):
    """ Raised when the host cannot load a source file"""


# -------------------------------
# Lexing
# -------------------------------
class TzLexError(TzError):
    """ Raised when the source text cannot be tokenized"""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at offset {position})")
        self.position = position


class TzUnterminatedString(TzLexError):
    """ Raised when input ends inside a string literal"""


class TzInvalidNumber(TzLexError):
    """ Raised on a malformed numeric literal"""


class TzUnexpectedCharacter(TzLexError):
    """ Raised on a character that starts no token"""

    def __init__(self, char: str, position: int):
        super().__init__(f"unexpected character: {char!r}", position)
        self.char = char


# -------------------------------
# Parsing
# -------------------------------
class TzSyntaxError(TzError):
    """ Raised when a token appears where a specific token or construct was required"""

    def __init__(self, token: Any, expected: Any):
        expected_str = getattr(expected, "name", expected)
        got = getattr(token.kind, "name", token.kind)
        super().__init__(
            f"expected {expected_str} but got {got} {token.text!r} (at offset {token.position})"
        )
        self.token = token
        self.expected = expected


# -------------------------------
# Evaluation
# -------------------------------
class TzRuntimeError(TzError):
    """ Base class for errors raised while evaluating a program"""


class TzUndefinedVariable(TzRuntimeError):
    """ Raised when a name is not bound in any enclosing scope"""

    def __init__(self, name: str):
        super().__init__(f"variable '{name}' is not defined")
        self.name = name


class TzAlreadyDefined(TzRuntimeError):
    """ Raised when a name is defined twice in the same scope"""

    def __init__(self, name: str):
        super().__init__(f"variable '{name}' is already defined")
        self.name = name


class TzConstantViolation(TzRuntimeError):
    """ Raised when assigning to a constant binding"""

    def __init__(self, name: str):
        super().__init__(f"variable '{name}' is a constant")
        self.name = name


class TzTypeError(TzRuntimeError):
    """ Raised when an operator or condition receives the wrong kind of value"""


class TzNotCallable(TzRuntimeError):
    """ Raised when calling a value that is not a function"""


class TzInvalidAssignmentTarget(TzRuntimeError):
    """ Raised when the left-hand side of '=' is not an identifier"""


class TzUnsupported(TzRuntimeError):
    """ Raised for operators that parse but have no evaluation rule"""


class TzRecursionLimit(TzRuntimeError):
    """ Raised when a program nests calls or expressions deeper than the host stack allows"""
