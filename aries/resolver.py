"""Identifier lookup against Solr and reshaping of the matched document."""

import logging
from urllib.parse import quote

from aries.models import AriesResult, ServiceProtocol, ServiceURL
from core.exceptions import (
    AmbiguousMatchError,
    BackendError,
    BackendUnreachableError,
    ItemNotFoundError,
    LookupServiceError,
)
from core.sentry import capture_exception
from core.telemetry import RequestTelemetry
from solr.client import SolrClient
from solr.models import SolrDocument
from solr.query import IdentifierQuery

logger = logging.getLogger(__name__)

VISIBLE_MARKER = "VISIBLE"
IIIF_FEATURE = "iiif"


def is_visible(doc: SolrDocument) -> bool:
    """A document without location tags is visible; otherwise it must carry VISIBLE."""
    tags = doc.shadowed_location_facet
    return not tags or VISIBLE_MARKER in tags


class Resolver:
    """Resolves an external identifier to an AriesResult."""

    def __init__(self, solr: SolrClient, site_url: str):
        self.solr = solr
        self.site_url = site_url.rstrip("/")

    def access_url(self, doc_id: str) -> str:
        return f"{self.site_url}/catalog/{quote(doc_id, safe='')}"

    def metadata_url(self, doc_id: str) -> str:
        return f"{self.site_url}/catalog/{quote(doc_id, safe='')}.xml"

    def manifest_url(self, doc_id: str) -> str:
        return f"{self.site_url}/iiif/{quote(doc_id, safe='')}/manifest.json"

    def build_result(self, doc: SolrDocument) -> AriesResult:
        """Reshape a single matched document."""
        result = AriesResult(
            identifier=[doc.id, *doc.alternate_id_facet, *doc.barcode_facet],
        )

        result.service_url.append(
            ServiceURL(url=self.solr.document_url(doc.id), protocol=ServiceProtocol.INDEX_LOOKUP)
        )
        if IIIF_FEATURE in doc.feature_facet:
            result.service_url.append(
                ServiceURL(
                    url=self.manifest_url(doc.id),
                    protocol=ServiceProtocol.IIIF_PRESENTATION,
                )
            )

        if is_visible(doc):
            result.access_url.append(self.access_url(doc.id))
            if doc.marc_display:
                result.metadata_url.append(self.metadata_url(doc.id))
        else:
            logger.info(f"{doc.id} is shadowed; omitting access and metadata URLs")

        return result

    def _report_backend_error(
        self, identifier: str, query: IdentifierQuery, error: LookupServiceError
    ) -> LookupServiceError:
        """Log a backend failure and send it to Sentry."""
        logger.error(f"Query for {identifier} FAILED: {error.message}")
        capture_exception(error, context={"identifier": identifier, "q": query.q})
        return error

    async def resolve(
        self, identifier: str, telemetry: RequestTelemetry | None = None
    ) -> AriesResult:
        """Look up the one document matching `identifier`.

        Raises:
            ItemNotFoundError: no document matched
            AmbiguousMatchError: more than one document matched
            BackendUnreachableError: Solr could not be reached
            BackendError: Solr answered with an error or an unusable body
        """
        query = IdentifierQuery(identifier)
        telemetry = telemetry or RequestTelemetry()

        try:
            with telemetry.track_step("solr_query"):
                telemetry.record_api_call("solr")
                resp = await self.solr.select(query)
        except (BackendUnreachableError, BackendError) as e:
            self._report_backend_error(identifier, query, e)
            raise

        logger.info(f"Parsing solr response for {identifier}")
        if resp.response_header.status != 0:
            raise self._report_backend_error(
                identifier,
                query,
                BackendError(
                    f"Solr status {resp.response_header.status}",
                    details={"identifier": identifier, "status": resp.response_header.status},
                ),
            )

        num_found = resp.response.num_found
        if num_found == 0:
            logger.info(f"Query for {identifier} had no hits")
            raise ItemNotFoundError(f"{identifier} not found", details={"identifier": identifier})

        if num_found > 1:
            logger.warning(f"Query for {identifier} matched {num_found} documents")
            raise AmbiguousMatchError(
                f"{identifier} matched {num_found} items; query: {query.query_string()}",
                details={"identifier": identifier, "num_found": num_found, "query": query.q},
            )

        if not resp.response.docs:
            raise self._report_backend_error(
                identifier,
                query,
                BackendError(
                    "Solr reported one hit but returned no documents",
                    details={"identifier": identifier},
                ),
            )

        return self.build_result(resp.response.docs[0])
