"""Textual representation of lisplet values, as shown by the REPL."""

from __future__ import annotations

from lisplet import LispValue
from lisplet.types.builtin import Builtin
from lisplet.types.function import UserFunction
from lisplet.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (str, Symbol)):
        return str(value)
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, UserFunction):
        return ""
    if isinstance(value, Builtin):
        return repr(value)
    return repr(value)
