import pytest

from deucerating.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts and ends with default global settings."""
    reset_settings()
    yield
    reset_settings()
