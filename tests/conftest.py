import io

import pytest

from tzlang.builtins import register
from tzlang.interpreter import Interpreter
from tzlang.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with null/true/false and print loaded."""
    return register(Environment(), stdout=io.StringIO())


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def interp(stdout):
    return Interpreter(stdout=stdout)
