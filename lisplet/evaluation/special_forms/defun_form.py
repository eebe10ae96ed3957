from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.config import Scoping
from lisplet.errors import LispletArityError, LispletTypeError
from lisplet.types.environment import Environment
from lisplet.types.function import UserFunction
from lisplet.types.symbol import Symbol


def defun_form(
    tail: list[SExpression],
    env: Environment,
    scoping: Scoping,
    _: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body)
    Binds the function in `env` itself: top-level definitions are global, a
    defun inside a function body only lives as long as that call's scope.
    """
    if len(tail) != 3:
        raise LispletArityError("defun", 3, len(tail))

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise LispletTypeError(f"defun: function name must be a symbol, got {name!r}")
    if not isinstance(params, list):
        raise LispletTypeError(f"defun: parameter list expected for {name}, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispletTypeError(f"defun: parameter names must be symbols, got {p!r}")

    closure_env = env if scoping is Scoping.LEXICAL else None
    env.define(name, UserFunction(name, list(params), body, closure_env))
    return f"Defined function: {str(name).upper()}"
