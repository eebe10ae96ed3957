"""User-defined function values created by `defun`."""

from __future__ import annotations

from io import StringIO

from lisplet import SExpression
from lisplet.types.environment import Environment
from lisplet.types.symbol import Symbol


class UserFunction:
    """A named (parameters, body) pair.

    `env` is the defining environment when the function was created under
    lexical scoping, and None under dynamic scoping, where the body runs in
    the caller's environment instead.
    """

    __slots__ = ("name", "params", "body", "env")

    def __init__(
        self,
        name: Symbol,
        params: list[Symbol],
        body: SExpression,
        env: Environment | None = None,
    ):
        self.name: Symbol = name
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment | None = env

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def is_closure(self) -> bool:
        return self.env is not None

    def __str__(self) -> str:
        from lisplet.printer import to_string

        with StringIO() as buffer:
            buffer.write(f"(defun {self.name} (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<UserFunction {self}>"
