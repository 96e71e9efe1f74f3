"""Async client for the Solr select handler."""

import logging

import httpx
from pydantic import ValidationError

from core.exceptions import BackendError, BackendUnreachableError
from core.sentry import add_solr_breadcrumb
from solr.models import SolrFullResponse
from solr.query import IdentifierQuery, document_query_string

logger = logging.getLogger(__name__)

PING_QUERY = "q=*:*&wt=json&rows=0"


class SolrClient:
    """Issues select queries against one Solr core.

    A single GET per call with a fixed timeout; failures are raised, never retried.
    """

    def __init__(self, base_url: str, core: str, timeout: float = 10.0):
        """Initialize the client.

        Args:
            base_url: Solr base URL, e.g. http://solr.example.org:8082/solr
            core: Name of the Solr core to query
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.core = core.strip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def core_url(self) -> str:
        return f"{self.base_url}/{self.core}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.core_url,
                headers={"User-Agent": "AriesVirgo/1.0"},
                timeout=self.timeout,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def document_url(self, doc_id: str) -> str:
        """Public select URL returning the single document with this id."""
        return f"{self.core_url}/select?{document_query_string(doc_id)}"

    async def _get(self, query_string: str) -> httpx.Response:
        url = f"{self.core_url}/select?{query_string}"
        logger.info(f"Get response for: {url}")
        client = await self._get_client()
        try:
            return await client.get(f"/select?{query_string}")
        except httpx.TimeoutException as e:
            logger.error(f"Timed out after {self.timeout}s getting {url}")
            raise BackendUnreachableError(
                f"Solr request timed out: {e}", details={"url": url}
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Unable to GET {url}: {e}")
            raise BackendUnreachableError(
                f"Solr request failed: {e}", details={"url": url}
            ) from e

    async def select(self, query: IdentifierQuery) -> SolrFullResponse:
        """Run an identifier query and parse the response.

        Raises:
            BackendUnreachableError: connection failure or timeout
            BackendError: non-2xx status or an unparseable body
        """
        add_solr_breadcrumb("select", {"q": query.q})
        response = await self._get(query.query_string())

        if not response.is_success:
            add_solr_breadcrumb(
                "select_failed", {"status_code": response.status_code}, level="warning"
            )
            raise BackendError(
                response.text or f"Solr returned HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            return SolrFullResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unable to parse response: {e}")
            raise BackendError("Unable to parse Solr response", details={"error": str(e)}) from e

    async def ping(self) -> bool:
        """Check Solr connectivity with a minimal request."""
        add_solr_breadcrumb("ping")
        try:
            response = await self._get(PING_QUERY)
        except BackendUnreachableError:
            return False
        return response.status_code == 200
