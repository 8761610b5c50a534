import pytest

from pi.table.components import register_builtin_components
from pi.table.diagnostics import Diagnostics


@pytest.fixture
def diagnostics():
    """Fresh diagnostics sink."""
    return Diagnostics()


@pytest.fixture
def builtin_components():
    """Restore the built-in components after a test edits the registry."""
    yield
    register_builtin_components()
