import math

import pytest

from lisplet.builtin.env_builtin import register, math_bindings
from lisplet.errors import LispletArityError, LispletArithmeticError, LispletTypeError
from lisplet.types.builtin import Builtin
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol


@pytest.mark.parametrize("name", ["+", "-", "*", "/", "<=", "<", ">", ">=", "!=", "="])
def test_operators_are_binary_builtins(env, name):
    op = env.find(Symbol(name))
    assert isinstance(op, Builtin)
    assert op.arity == 2


def test_true_division(env):
    assert env.find(Symbol("/"))([7, 2]) == 3.5


def test_math_functions_and_constants(env):
    assert isinstance(env.find(Symbol("sin")), Builtin)
    assert env.find(Symbol("cos"))([0]) == 1.0
    assert env.find(Symbol("pi")) == math.pi
    assert env.find(Symbol("e")) == math.e


def test_math_bindings_cover_public_names():
    names = {str(s) for s in math_bindings()}
    assert {"sin", "cos", "tan", "exp", "log", "sqrt", "pi", "e", "inf"} <= names
    assert not any(n.startswith("_") for n in names)


def test_numeric_helpers(run):
    assert run("(abs -3)") == 3
    assert run("(max 1 5 3)") == 5
    assert run("(min 4 2)") == 2
    assert run("(round 2.6)") == 3


def test_boolean_literals(env):
    assert env.find(Symbol("#t")) is True
    assert env.find(Symbol("#f")) is False


@pytest.mark.parametrize("source", ["(+ 1)", "(+ 1 2 3)", "(< 1)"])
def test_operator_arity(run, source):
    with pytest.raises(LispletArityError) as info:
        run(source)
    assert info.value.expected == 2


@pytest.mark.parametrize("source", ["(/ 1 0)", "(sqrt -1)", "(log 0)", "(exp 100000)"])
def test_arithmetic_errors(run, source):
    with pytest.raises(LispletArithmeticError):
        run(source)


def test_type_errors(run):
    run("(defun f () 1)")
    with pytest.raises(LispletTypeError):
        run("(+ 1 f)")
    with pytest.raises(LispletTypeError):
        run("(sin 1 2)")


def test_builtins_print_by_name():
    assert repr(Builtin("sin", math.sin)) == "#<builtin sin>"


def test_register_into_fresh_environment():
    env = Environment()
    register(env)
    assert env.find(Symbol("+"))([1, 2]) == 3
