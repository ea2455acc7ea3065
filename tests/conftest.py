import pytest

from ceceio.interpreter import Interpreter
from ceceio.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter without the prelude, so tests see only their own defs."""
    return Interpreter(prelude=None)


@pytest.fixture
def prelude_interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    # Tests must not depend on the developer's shell settings
    for var in ("CECEIO_PRELUDE_PATH", "CECEIO_LOG_LEVEL", "CECEIO_STRICT_PARSE"):
        monkeypatch.delenv(var, raising=False)
