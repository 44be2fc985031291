import pytest

from pill.infrastructure.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
