from __future__ import annotations
import os
from enum import Enum


class Scoping(str, Enum):
    """How user functions bind their parameters when called."""

    # parameters are bound onto the caller's environment
    DYNAMIC = "dynamic"
    # parameters are bound in a new scope chained to the defining environment
    LEXICAL = "lexical"


DEFAULT_SCOPING = Scoping.DYNAMIC
DEFAULT_RECURSION_LIMIT = 10_000

SCOPING_VAR = 'LISPLET_SCOPING'
RECURSION_LIMIT_VAR = 'LISPLET_RECURSION_LIMIT'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_scoping() -> Scoping:
    raw = value_from_env(SCOPING_VAR, DEFAULT_SCOPING.value).lower()
    try:
        return Scoping(raw)
    except ValueError:
        choices = ", ".join(s.value for s in Scoping)
        raise ValueError(f"{SCOPING_VAR} must be one of {choices}, got {raw!r}") from None


def get_recursion_limit() -> int:
    raw = value_from_env(RECURSION_LIMIT_VAR, str(DEFAULT_RECURSION_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"{RECURSION_LIMIT_VAR} must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"{RECURSION_LIMIT_VAR} must be positive, got {limit}")
    return limit
