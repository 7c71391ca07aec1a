import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI commands configure structlog globally; undo it after each test."""
    yield
    structlog.reset_defaults()
