"""Shared test fixtures for pytest."""

from unittest.mock import AsyncMock

import pytest

from config.settings import Settings
from solr.client import SolrClient
from tests.factories import SITE_URL, SOLR_CORE, SOLR_URL, make_solr_document


@pytest.fixture
def test_settings(monkeypatch):
    """Settings with safe test defaults (no real DSNs or keys)."""
    monkeypatch.setenv("SENTRY_DSN", "")
    monkeypatch.setenv("POSTHOG_API_KEY", "")
    monkeypatch.setenv("ENABLE_TELEMETRY", "false")
    return Settings(
        solr_url=SOLR_URL,
        solr_core=SOLR_CORE,
        site_url=SITE_URL,
        sentry_dsn=None,
        posthog_api_key=None,
        enable_telemetry=False,
    )


@pytest.fixture
def solr_client():
    """A real SolrClient whose select() is mocked."""
    client = SolrClient(base_url=SOLR_URL, core=SOLR_CORE)
    client.select = AsyncMock()
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
def sample_document():
    return make_solr_document()
