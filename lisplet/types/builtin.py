"""Host-implemented functions exposed to lisplet code."""

from __future__ import annotations

from typing import Callable

from lisplet import LispValue
from lisplet.errors import LispletArityError, LispletArithmeticError, LispletTypeError


class Builtin:
    """Wraps a Python callable so the evaluator can tell it apart from user functions.

    `arity` is the exact number of arguments the callable takes, or None when
    the callable validates its own arguments (e.g. the `math` functions).
    Host exceptions are translated into lisplet errors.
    """

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: Callable[..., LispValue], arity: int | None = None):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args: list[LispValue]) -> LispValue:
        if self.arity is not None and len(args) != self.arity:
            raise LispletArityError(self.name, self.arity, len(args))
        try:
            return self.fn(*args)
        except ZeroDivisionError as err:
            raise LispletArithmeticError(f"{self.name}: division by zero") from err
        except (ValueError, OverflowError) as err:
            raise LispletArithmeticError(f"{self.name}: {err}") from err
        except TypeError as err:
            raise LispletTypeError(f"{self.name}: {err}") from err

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"
