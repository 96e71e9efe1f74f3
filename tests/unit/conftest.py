"""Unit test fixtures."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_settings(test_settings):
    return test_settings


@pytest.fixture
def mock_posthog_client():
    """Mock PostHog client."""
    client = Mock()
    client.capture = Mock()
    client.flush = Mock()
    client.shutdown = Mock()
    return client


@pytest.fixture(autouse=True)
def reset_dependency_singletons():
    """Drop module-level clients so no test sees another's instances."""
    import core.dependencies as deps_module

    deps_module._solr_client = None
    deps_module._posthog_client = None
    yield
    deps_module._solr_client = None
    deps_module._posthog_client = None
