"""Runtime environment for lisplet.

An Environment is one scope: a mapping of Symbols to evaluated values plus a
link to the enclosing scope. Lookups search this scope first and then walk
outward; definitions only ever touch this scope. The outer link is fixed when
the scope is created, so the chain can never form a cycle.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from lisplet import LispValue
from lisplet.errors import LispletInvalidSymbol, LispletUnboundSymbol
from lisplet.types.symbol import Symbol


class Environment:
    """Chained mapping from Symbols to lisplet values."""

    __slots__ = ("_vars", "_outer")

    def __init__(
        self,
        params: Iterable[Symbol] = (),
        args: Iterable[LispValue] = (),
        outer: Optional[Environment] = None,
    ):
        params = list(params)
        args = list(args)
        if len(params) != len(args):
            raise ValueError(
                f"Cannot bind {len(params)} parameter(s) to {len(args)} argument(s)"
            )
        self._vars: dict[Symbol, LispValue] = {}
        self._outer: Environment | None = outer
        for name, value in zip(params, args):
            self.define(name, value)

    @property
    def outer(self) -> Optional[Environment]:
        return self._outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, replacing any existing binding.

        Raises LispletInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispletInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self._vars[name] = value

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this scope."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, name: Symbol) -> LispValue:
        """Return the value bound to `name` in the nearest enclosing scope.

        Raises LispletUnboundSymbol if no scope in the chain binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env._vars:
                return env._vars[name]
            env = env._outer
        raise LispletUnboundSymbol(f"Unbound symbol: {name}")

    def __contains__(self, name: Symbol) -> bool:
        try:
            self.find(name)
        except LispletUnboundSymbol:
            return False
        return True

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self._vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self._outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost scope first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env._outer
        return f"<Environment chain: {' -> '.join(chain)}>"
