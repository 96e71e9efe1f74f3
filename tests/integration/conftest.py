"""Integration test fixtures.

Provides a real SolrClient whose HTTP transport is an in-process fake Solr,
seeded with representative catalog documents.
"""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
import pytest_asyncio

from solr.client import SolrClient
from tests.factories import SOLR_CORE, SOLR_URL, make_solr_document, make_solr_payload

# ---------------------------------------------------------------------------
# Seed data -- representative catalog documents
# ---------------------------------------------------------------------------

SEED_DOCS = [
    make_solr_document(id="uva123", barcode_facet=["X000111"]),
    make_solr_document(
        id="uva456",
        alternate_id_facet=["tsb:456"],
        barcode_facet=["X000222", "X000223"],
        feature_facet=["iiif", "availability"],
    ),
    make_solr_document(
        id="uva789",
        barcode_facet=["X000333"],
        shadowed_location_facet=["SHADOWED"],
    ),
    make_solr_document(id="uva900", barcode_facet=["DUP001"], marc_display=""),
    make_solr_document(id="uva901", barcode_facet=["DUP001"]),
]


def _matches(doc, value: str) -> bool:
    return value == doc.id or value in doc.alternate_id_facet or value in doc.barcode_facet


class FakeSolr:
    """Answers select requests from SEED_DOCS, recording every request."""

    def __init__(self, docs):
        self.docs = docs
        self.requests: list[httpx.Request] = []
        self.fail_with: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, text="Solr is down")

        params = parse_qs(urlsplit(str(request.url)).query)
        q = params["q"][0]
        if q == "*:*":
            return httpx.Response(200, json=make_solr_payload())

        # Every clause carries the same phrase: field:"value"
        value = q.split(" OR ")[0].split(":", 1)[1].strip('"')
        hits = [d for d in self.docs if _matches(d, value)]
        return httpx.Response(200, json=make_solr_payload(hits))


@pytest.fixture
def fake_solr():
    return FakeSolr(SEED_DOCS)


@pytest_asyncio.fixture
async def solr_client(fake_solr):
    """Real SolrClient wired to the fake Solr transport."""
    client = SolrClient(base_url=SOLR_URL, core=SOLR_CORE)
    client._client = httpx.AsyncClient(
        base_url=client.core_url, transport=httpx.MockTransport(fake_solr.handler)
    )
    yield client
    await client.close()


@pytest_asyncio.fixture
async def app_client(solr_client, test_settings):
    """httpx AsyncClient against the app with the fake Solr and no telemetry."""
    from httpx import ASGITransport, AsyncClient

    from config.settings import get_settings
    from core.dependencies import get_posthog_client, get_solr_client
    from main import app

    app.dependency_overrides[get_solr_client] = lambda: solr_client
    app.dependency_overrides[get_posthog_client] = lambda: None
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
