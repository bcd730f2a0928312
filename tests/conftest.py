import pytest

from sevenlang.config import Scoping
from sevenlang.reader.lexer import tokenize
from sevenlang.reader.parser import parse
from sevenlang.types.environment import Environment


# Every test starts from the default configuration regardless of the
# caller's shell; tests that need a setting use monkeypatch.setenv.
@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    for var in ("SEVENLANG_SCOPING", "SEVENLANG_STRICT_STRINGS", "SEVENLANG_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh environment with the default, shared scoping."""
    return Environment(scoping=Scoping.SHARED)


@pytest.fixture
def lexical_env():
    return Environment(scoping=Scoping.LEXICAL)


def run_source(source, env=None):
    """Evaluate every form of `source` in order and return the last result."""
    if env is None:
        env = Environment()
    result = None
    for expr in parse(tokenize(source)):
        result = expr.evaluate(env)
    return result


@pytest.fixture
def run(env):
    return lambda source: run_source(source, env)
