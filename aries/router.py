"""Aries lookup API router."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from posthog import Posthog

from aries.models import AriesResult
from aries.resolver import Resolver
from core.dependencies import get_posthog_client, get_resolver
from core.exceptions import AmbiguousMatchError, ItemNotFoundError, LookupServiceError
from core.telemetry import RequestTelemetry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/aries", tags=["aries"])


def _outcome(error: LookupServiceError | None) -> str:
    if error is None:
        return "found"
    if isinstance(error, AmbiguousMatchError):
        return "ambiguous"
    if isinstance(error, ItemNotFoundError):
        return "not_found"
    return "backend_error"


@router.get("", response_class=PlainTextResponse, summary="Aries liveness")
async def aries_ping():
    """Alive message for requests with no identifier."""
    return "Aries Virgo API"


@router.get(
    "/{identifier}",
    response_model=AriesResult,
    response_model_exclude_defaults=True,
    summary="Resolve an identifier",
    description="""
    Looks up a single catalog record whose id, alternate id or barcode equals
    `identifier` and reports its identifiers, service endpoints, public access
    page and metadata export.

    Example request:
    ```
    GET /api/aries/u123456
    ```
    """,
    responses={
        200: {"description": "Exactly one record matched"},
        400: {"description": "More than one record matched", "content": {"text/plain": {}}},
        404: {"description": "No record matched or Solr failed", "content": {"text/plain": {}}},
    },
)
async def aries_lookup(
    identifier: str,
    resolver: Resolver = Depends(get_resolver),
    posthog_client: Posthog | None = Depends(get_posthog_client),
):
    """Resolve an identifier through Solr."""
    telemetry = RequestTelemetry()
    error: LookupServiceError | None = None

    try:
        return await resolver.resolve(identifier, telemetry=telemetry)
    except AmbiguousMatchError as e:
        error = e
        return PlainTextResponse(e.message, status_code=400)
    except LookupServiceError as e:
        error = e
        logger.info(f"Lookup for {identifier} failed: {type(e).__name__}: {e.message}")
        return PlainTextResponse(f"{identifier} not found", status_code=404)
    finally:
        if posthog_client:
            telemetry.send_to_posthog(posthog_client, {"outcome": _outcome(error)})
