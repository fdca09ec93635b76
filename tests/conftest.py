import pytest

from tale.builtins import default_environment
from tale.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with the primitive library."""
    return default_environment()


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()
