import pytest

from gcsf.registry import clear_registry


@pytest.fixture(autouse=True)
def isolated_registry():
    """Keep the process-wide operation registry empty between tests."""

    clear_registry()
    yield
    clear_registry()
