"""Built-in functions for the lisplet global environment.

Binary arithmetic and comparison operators, Python's `math` module exposed
under its own names, a few numeric helpers and the boolean literals.
"""
from __future__ import annotations

import math
import operator

from lisplet import LispValue
from lisplet.types.builtin import Builtin
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol


# -------------------------------
# Arithmetic
# -------------------------------
ARITHMETIC: dict[str, object] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

# -------------------------------
# Comparison
# -------------------------------
COMPARISON: dict[str, object] = {
    "<=": operator.le,
    "<": operator.lt,
    ">": operator.gt,
    ">=": operator.ge,
    "!=": operator.ne,
    "=": operator.eq,
}

# -------------------------------
# Numeric helpers
# -------------------------------
NUMERIC: dict[str, object] = {
    "abs": abs,
    "max": max,
    "min": min,
    "round": round,
}

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}


def math_bindings() -> dict[Symbol, LispValue]:
    """Every public name of the `math` module: functions wrapped as Builtins,
    constants (pi, e, tau, inf, nan) as plain floats."""
    bindings: dict[Symbol, LispValue] = {}
    for name in dir(math):
        if name.startswith("_"):
            continue
        value = getattr(math, name)
        bindings[Symbol(name)] = Builtin(name, value) if callable(value) else value
    return bindings


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update(math_bindings())
    env.update({Symbol(name): Builtin(name, fn, arity=2) for name, fn in ARITHMETIC.items()})
    env.update({Symbol(name): Builtin(name, fn, arity=2) for name, fn in COMPARISON.items()})
    env.update({Symbol(name): Builtin(name, fn) for name, fn in NUMERIC.items()})
    env.update({Symbol(name): value for name, value in BOOLEANS.items()})
