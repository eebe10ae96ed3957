# Core type aliases for lisplet's data model.
# Plain Python values represent both code (forms) and runtime values:
# int, float, Symbol and nested lists for code; additionally bool, str,
# UserFunction and Builtin for values produced by evaluation.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

# The aliases above must exist before the submodules below are imported.
from lisplet.reader.parser import tokenize, parse_atom, read, parse, parse_all, are_parens_matched  # noqa: E402
from lisplet.types.environment import Environment  # noqa: E402
from lisplet.evaluation.evaluator import evaluate  # noqa: E402
from lisplet.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "tokenize",
    "parse_atom",
    "read",
    "parse",
    "parse_all",
    "are_parens_matched",
    "Environment",
    "evaluate",
    "Interpreter",
]
