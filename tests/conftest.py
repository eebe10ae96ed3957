import pytest

from lisplet.config import Scoping
from lisplet.types.environment import Environment
from lisplet.builtin.env_builtin import register
from lisplet.reader.parser import parse_all
from lisplet.evaluation.evaluator import evaluate

# Behaviour that does not depend on how parameters are scoped is checked under
# both modes: tests that take the `run` fixture execute once per mode.


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture(params=[Scoping.DYNAMIC, Scoping.LEXICAL], ids=["dynamic", "lexical"])
def scoping(request):
    return request.param


@pytest.fixture
def run(env, scoping):
    """Evaluate every form of a source string, returning the last value."""
    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env, scoping)
        return result
    return _run


@pytest.fixture(autouse=True)
def _default_scoping(monkeypatch):
    # Keep a developer's LISPLET_* settings from leaking into the suite
    monkeypatch.delenv("LISPLET_SCOPING", raising=False)
    monkeypatch.delenv("LISPLET_RECURSION_LIMIT", raising=False)
