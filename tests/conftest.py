import pytest

import sms_segments.config


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration so each test reads its own environment."""
    sms_segments.config._config = None
    yield
    sms_segments.config._config = None
