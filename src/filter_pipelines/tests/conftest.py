# ABOUTME: pytest configuration for filter pipeline tests
# ABOUTME: Configures markers, timeouts and settings isolation

import pytest

from filter_pipelines.config.settings import get_settings


def pytest_configure(config):
    """Configure pytest for filter pipeline tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so environment changes made by a test stay local to it."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
