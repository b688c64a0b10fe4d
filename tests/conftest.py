"""
Common test fixtures and configurations for pytest.

These fixtures pin the fixture generator's configuration to the reference
values explicitly, so the suite doesn't depend on FIXTURES_* env vars set in
the shell running it.
"""

import itertools
import uuid
from unittest.mock import MagicMock

import pytest

from core.config import Config, ExecConf, FixtureConf
from core.logger import Logger


@pytest.fixture
def mock_logger():
    """Mock logger for testing."""
    return MagicMock(spec=Logger)


@pytest.fixture
def fixture_config(tmp_path):
    """Reference configuration: 30 records from 2014-05-01, 15 days apart."""
    return FixtureConf(
        count=30, start="2014-05-01", step_days=15, output_dir=str(tmp_path)
    )


@pytest.fixture
def config(fixture_config):
    return Config(ExecConf(quiet=True), fixture_config)


@pytest.fixture
def deterministic_ids():
    """
    An id factory yielding 00000000-0000-0000-0000-000000000001, ...002, etc.
    """
    counter = itertools.count(1)

    def factory() -> str:
        return str(uuid.UUID(int=next(counter)))

    return factory
