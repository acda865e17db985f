import pytest

from structedit.config import configure


@pytest.fixture
def production():
    """Run a test with STRUCTEDIT_ENV=production semantics."""
    previous = configure(env="production")
    yield
    configure(env=previous.env)


@pytest.fixture
def development():
    previous = configure(env="development")
    yield
    configure(env=previous.env)
