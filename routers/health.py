"""Health check, version and favicon routes."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from config.settings import Settings, get_settings
from core.dependencies import get_solr_client
from solr.client import SolrClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

CHECK_TIMEOUT = 3.0


async def _check_solr(solr_client: SolrClient) -> str:
    """Ping Solr with a zero-row query."""
    return "true" if await solr_client.ping() else "false"


async def _run_check(coro) -> str:
    """Run a single health check with a timeout."""
    try:
        return await asyncio.wait_for(coro, timeout=CHECK_TIMEOUT)
    except TimeoutError:
        logger.warning(f"Health check timed out after {CHECK_TIMEOUT}s")
        return "false"


@router.get("/favicon.ico", include_in_schema=False)
async def favicon():
    """Silence browser requests for /favicon.ico."""
    return Response(status_code=204)


@router.get("/version", response_class=PlainTextResponse, summary="Service version")
async def version(settings: Settings = Depends(get_settings)):
    return f"Aries Virgo version {settings.app_version}"


@router.get(
    "/healthcheck",
    summary="Health check",
    responses={200: {"description": "Reachability of this service and of Solr"}},
)
async def health_check(solr_client: SolrClient = Depends(get_solr_client)):
    """Report this service as alive and whether Solr answers."""
    solr_status = await _run_check(_check_solr(solr_client))
    if solr_status != "true":
        logger.warning(f"Solr at {solr_client.core_url} is not responding")

    return JSONResponse(content={"AriesVirgo": "true", "Virgo": solr_status})
