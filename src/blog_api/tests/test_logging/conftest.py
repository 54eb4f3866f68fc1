import pytest

from blog_api.core.logging.builder import setup_logging


@pytest.fixture(autouse=True)
def restore_logging(test_settings):
    """Tests in this package reinstall logging with their own settings; put the session config back."""
    yield
    setup_logging(test_settings)
