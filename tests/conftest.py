import pytest

from pon.builtin.env_builtin import register
from pon.evaluation.evaluator import evaluate
from pon.interpreter import Interpreter
from pon.reader.parser import read
from pon.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the primitives loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read and evaluate one line of source against the `env` fixture."""
    def _run(source):
        return evaluate(read(source), env)
    return _run
