"""The `format` special form.

(format t word... (fill-expr))

Words are never evaluated: each is printed, stripped of double quotes and
joined with single spaces. A trailing list is evaluated and its value is
substituted for the placeholders, `~a~%` (value followed by a newline) and
`~a` (value only).
"""

from lisplet import EvaluatorFn
from lisplet import SExpression, LispValue
from lisplet.config import Scoping
from lisplet.errors import LispletArityError
from lisplet.printer import to_string
from lisplet.types.environment import Environment

LINE_PLACEHOLDER = "~a~%"
PLACEHOLDER = "~a"


def fill_placeholders(template: str, fill: str) -> str:
    """Substitute `fill` into both placeholder spellings of `template`."""
    return template.replace(LINE_PLACEHOLDER, fill + "\n").replace(PLACEHOLDER, fill)


def format_form(
    tail: list[SExpression],
    env: Environment,
    scoping: Scoping,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise LispletArityError("format", 1, 0, at_least=True)

    # tail[0] is the destination (conventionally t) and is ignored
    words = tail[1:]
    fill_expr = None
    if words and isinstance(words[-1], list):
        fill_expr = words[-1]
        words = words[:-1]

    text = " ".join(to_string(w).replace('"', "") for w in words)
    if fill_expr is None:
        return text
    fill = evaluate_fn(fill_expr, Environment(outer=env), scoping)
    return fill_placeholders(text, to_string(fill))
