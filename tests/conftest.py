# tests/conftest.py
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def reset_logging():
    """Give every test freshly built loggers."""
    from envkit.logger import teardown_logging

    teardown_logging()
    yield
    teardown_logging()


@pytest.fixture
def fake_env() -> dict[str, str]:
    """An injected environment that never touches os.environ."""
    return {
        "PORT": "8080",
        "HOST": "db.internal",
        "TLS_ENABLED": "Yes",
        "TAGS": "web, api ,db",
        "RATIO": "0.75",
        "CACHE_SIZE": "512MB",
        "BLANK": "",
        "PADDED": "  value  ",
    }
