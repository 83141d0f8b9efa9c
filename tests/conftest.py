"""Pytest configuration for mongo_fixtures tests.

Key Principles:
- No MongoDB server: engine tests run against the in-memory fake
- Every test gets its own fixtures directory under tmp_path
- Mock the logger when asserting on log events
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# tests directory (for fakes.*)
tests_root = Path(__file__).parent
if str(tests_root) not in sys.path:
    sys.path.insert(0, str(tests_root))

from fakes import FakeConnection, FakeDatabase  # noqa: E402


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    logger.bind = MagicMock(return_value=logger)
    return logger


@pytest.fixture
def fake_db():
    return FakeDatabase("fixtures_test")


@pytest.fixture
def fake_connection(fake_db):
    return FakeConnection(fake_db)


@pytest.fixture
def fixtures_dir(tmp_path):
    directory = tmp_path / "fixtures"
    directory.mkdir()
    return directory


@pytest.fixture
def write_fixture(fixtures_dir):
    """Write a file into the fixtures directory.

    Lists and dicts are dumped as JSON; strings are written verbatim.
    """
    def _write(name, content):
        path = fixtures_dir / name
        if isinstance(content, (list, dict)):
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (may use mocks)"
    )
