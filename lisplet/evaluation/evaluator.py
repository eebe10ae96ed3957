"""Core evaluator for the lisplet interpreter.

`evaluate` is the entry point used by drivers; `evaluate0` is the recursive
worker handed to special forms and the application engine. All state lives
in the Environment chain passed in, so evaluation has no module-level state.
"""

from __future__ import annotations

from lisplet import SExpression, LispValue
from lisplet.config import Scoping, get_scoping
from lisplet.errors import LispletRecursionError, LispletTypeError
from lisplet.evaluation.apply import apply
from lisplet.evaluation.special_forms import SPECIAL_FORMS
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol


def evaluate(
    expr: SExpression, env: Environment, scoping: Scoping | None = None
) -> LispValue:
    """
    Evaluate `expr` in `env`.

    `scoping` decides how functions defined during this evaluation bind their
    parameters; it defaults to the LISPLET_SCOPING setting. Exhausting the
    host stack raises LispletRecursionError.
    """
    if scoping is None:
        scoping = get_scoping()
    try:
        return evaluate0(expr, env, scoping)
    except RecursionError:
        raise LispletRecursionError(
            "Maximum recursion depth exceeded during evaluation"
        ) from None


def evaluate0(expr: SExpression, env: Environment, scoping: Scoping) -> LispValue:
    """Single recursive evaluation step."""
    match expr:
        case int() | float():
            return expr
        case Symbol():
            return env.find(expr)
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, scoping, evaluate0)
        case [head, *tail]:
            fn = evaluate0(head, Environment(outer=env), scoping)
            args = [evaluate0(arg, Environment(outer=env), scoping) for arg in tail]
            return apply(fn, args, env, scoping, evaluate0)
        case []:
            raise LispletTypeError("Cannot evaluate an empty application ()")

    raise LispletTypeError(f"Cannot evaluate {expr!r}")
