import pytest
from pathnorm.core import Path


def pytest_configure(config):
    """
    Keep the user's own policy profiles out of the test run. This hook is
    called early in the pytest process, before any test module is imported.
    """
    import os

    os.environ.setdefault("PATHNORM_NO_USER_POLICIES", "1")


@pytest.fixture
def recorder() -> Path:
    """A sink that records everything it receives."""
    return Path()
