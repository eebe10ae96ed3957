"""Application engine for lisplet.

Centralizes what happens once the head and arguments of a call have been
evaluated:
- User functions are arity checked and their body evaluated, binding the
  parameters according to the scoping mode the function was defined under.
- Builtins are invoked with the argument list.
- Numbers, strings and booleans in head position are returned unchanged.
- Anything else cannot be applied.
"""

from lisplet import LispValue, EvaluatorFn
from lisplet.config import Scoping
from lisplet.errors import LispletArityError, LispletTypeError
from lisplet.types.builtin import Builtin
from lisplet.types.environment import Environment
from lisplet.types.function import UserFunction


def apply_function(
    fn: UserFunction,
    args: list[LispValue],
    env: Environment,
    scoping: Scoping,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined function.

    - fn: the function being applied.
    - args: the already-evaluated argument values.
    - env: the environment the call was evaluated in.

    A function defined under lexical scoping runs in a new scope chained to
    the environment it was defined in. Otherwise each parameter is defined
    directly in `env` and the body runs in a child of `env`, so the body sees
    the caller's bindings and the parameters stay bound in `env` afterwards.
    """
    if len(args) != fn.arity:
        raise LispletArityError(fn.name, fn.arity, len(args))

    if fn.is_closure:
        return evaluate_fn(fn.body, Environment(fn.params, args, fn.env), scoping)

    for param, arg in zip(fn.params, args):
        env.define(param, arg)
    return evaluate_fn(fn.body, Environment(outer=env), scoping)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    scoping: Scoping,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(head, UserFunction):
        return apply_function(head, args, env, scoping, evaluate_fn)
    if isinstance(head, (int, float, str)):
        return head
    if isinstance(head, Builtin):
        return head(args)
    raise LispletTypeError(f"Cannot apply non-function {head!r}")
