from __future__ import annotations

import logging
import sys
from typing import Callable

from lisplet import LispValue
from lisplet.config import Scoping, get_scoping, get_recursion_limit
from lisplet.reader.parser import parse_all
from lisplet.evaluation.evaluator import evaluate
from lisplet.types.builtin import Builtin
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol
from lisplet.builtin.env_builtin import register
from lisplet.printer import to_string

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A lisplet session: owns one root Environment, populated with the
    builtins, that persists across calls to `eval`.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        scoping: Scoping | str | None = None,
        recursion_limit: int | None = None,
    ):
        self.scoping: Scoping = Scoping(scoping) if scoping is not None else get_scoping()
        limit = recursion_limit if recursion_limit is not None else get_recursion_limit()
        # Only ever raise the host limit; other code in the process may rely on it
        if limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)
        logger.debug("interpreter ready (scoping=%s)", self.scoping.value)

        if prelude:
            self.eval(prelude)

    def define(self, name: str | Symbol, value: LispValue | Callable[..., LispValue]) -> None:
        """Bind a host value in the root environment; plain callables become Builtins."""
        sym = name if isinstance(name, Symbol) else Symbol(name)
        if callable(value) and not isinstance(value, Builtin):
            value = Builtin(str(sym), value)
        self.env.define(sym, value)

    def eval_expr(self, expr) -> LispValue:
        result = evaluate(expr, self.env, self.scoping)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("evaluated %s => %s", to_string(expr), to_string(result))
        return result

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`.

        Returns None when there are no forms, the value itself for a single
        form, and the list of values otherwise.
        """
        results = [self.eval_expr(expr) for expr in parse_all(code)]
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results
