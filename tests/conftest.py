"""
Pytest configuration and fixtures for RetailMetrics mock API tests.

Provides seeded random sources, small configurations, generated data and
a FastAPI test client.
"""

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from retail_metrics.config.models import MockDataConfig  # noqa: E402
from retail_metrics.generators import (  # noqa: E402
    MockDataGenerator,
    RandomSource,
    initialize_mock_data,
)

TEST_SEED = 42


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables from leaking into configuration."""
    for name in (
        "PORT",
        "ALLOWED_ORIGINS",
        "RETAIL_METRICS_CONFIG_FILE",
        "RETAIL_METRICS_PORT",
        "RETAIL_METRICS_HOST",
        "RETAIL_METRICS_SEED",
        "RETAIL_METRICS_STORE_COUNT",
        "RETAIL_METRICS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def random_source() -> RandomSource:
    """Seeded random source."""
    return RandomSource(TEST_SEED)


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data for testing."""
    return {
        "server": {"host": "127.0.0.1", "port": 3001, "log_level": "INFO"},
        "generation": {"seed": TEST_SEED, "store_count": 5},
    }


@pytest.fixture
def small_config(sample_config_data) -> MockDataConfig:
    """Configuration generating five stores from a fixed seed."""
    return MockDataConfig(**sample_config_data)


@pytest.fixture
def generator(small_config) -> MockDataGenerator:
    """Generator drawing from a fixed seed."""
    return MockDataGenerator(small_config, RandomSource(TEST_SEED))


@pytest.fixture
def stores(generator):
    """Sixty stores: enough to cover every region and wrap the rank cycle."""
    return generator.generate_stores(60)


@pytest.fixture
def data_store(small_config):
    """Complete five-store dataset."""
    return initialize_mock_data(small_config)


@pytest.fixture
def client(small_config, data_store):
    """Test client over an application serving the five-store dataset."""
    from fastapi.testclient import TestClient

    from retail_metrics.main import create_app

    with TestClient(create_app(small_config, data_store)) as test_client:
        yield test_client
