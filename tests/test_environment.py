import pytest

from tzlang.errors import TzAlreadyDefined, TzConstantViolation, TzUndefinedVariable
from tzlang.types.environment import Environment
from tzlang.types.values import NULL, TRUE, FloatValue


def test_define_and_lookup():
    env = Environment()
    assert env.define("x", FloatValue(1.0)) == FloatValue(1.0)
    assert env.lookup("x") == FloatValue(1.0)
    assert env.resolve("x") == FloatValue(1.0)


def test_define_twice_in_same_scope_fails():
    env = Environment()
    env.define("x", NULL)
    with pytest.raises(TzAlreadyDefined) as info:
        env.define("x", NULL)
    assert info.value.name == "x"


def test_shadowing_in_child_scope():
    parent = Environment()
    parent.define("x", FloatValue(1.0))
    child = Environment(parent)
    child.define("x", FloatValue(2.0))
    assert child.lookup("x") == FloatValue(2.0)
    assert parent.lookup("x") == FloatValue(1.0)


def test_lookup_walks_parent_chain():
    root = Environment()
    root.define("x", TRUE)
    leaf = Environment(Environment(Environment(root)))
    assert leaf.lookup("x") is TRUE
    assert leaf.find("x") is root


def test_lookup_undefined():
    with pytest.raises(TzUndefinedVariable) as info:
        Environment(Environment()).lookup("nope")
    assert info.value.name == "nope"


def test_assign_mutates_defining_scope():
    root = Environment()
    root.define("x", FloatValue(1.0))
    child = Environment(root)
    assert child.assign("x", FloatValue(5.0)) == FloatValue(5.0)
    assert root.lookup("x") == FloatValue(5.0)
    assert not child.has("x")


def test_assign_undefined():
    with pytest.raises(TzUndefinedVariable):
        Environment().assign("x", NULL)


def test_assign_constant():
    root = Environment()
    root.define("k", TRUE, constant=True)
    with pytest.raises(TzConstantViolation):
        Environment(root).assign("k", NULL)
    assert root.lookup("k") is TRUE


def test_has_and_is_constant_are_local():
    root = Environment()
    root.define("k", TRUE, constant=True)
    child = Environment(root)
    assert root.has("k") and root.is_constant("k")
    assert not child.has("k") and not child.is_constant("k")


def test_reset_clears_scope():
    env = Environment()
    env.define("k", TRUE, constant=True)
    env.reset()
    assert not env.has("k")
    env.define("k", NULL)
    assert env.lookup("k") == NULL


def test_str_and_repr():
    root = Environment()
    root.define("x", FloatValue(1.0))
    child = Environment(root)
    child.define("y", TRUE, constant=True)
    assert str(child) == "{const y: true} -> ..."
    assert repr(child) == "<Environment chain: {const y: true} -> {x: 1}>"


def test_assign_through_shadow_of_constant():
    root = Environment()
    root.define("k", TRUE, constant=True)
    child = Environment(root)
    child.define("k", FloatValue(1.0))
    with pytest.raises(TzConstantViolation):
        child.assign("k", FloatValue(2.0))
    assert child.lookup("k") == FloatValue(1.0)
    assert root.lookup("k") is TRUE
