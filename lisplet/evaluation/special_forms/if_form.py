from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.config import Scoping
from lisplet.errors import LispletArityError
from lisplet.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    scoping: Scoping,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if cond then else)

    Only the boolean False selects the else branch; 0 and every other value
    count as true.
    """
    if len(tail) != 3:
        raise LispletArityError("if", 3, len(tail))

    cond_expr, then_expr, else_expr = tail
    cond = evaluate_fn(cond_expr, Environment(outer=env), scoping)
    branch = else_expr if cond is False else then_expr
    return evaluate_fn(branch, Environment(outer=env), scoping)
