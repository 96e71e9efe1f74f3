"""FastAPI dependency injection providers."""

import logging

from fastapi import Depends
from posthog import Posthog

from aries.resolver import Resolver
from config.settings import Settings, get_settings
from core.exceptions import ConfigurationError
from solr.client import SolrClient

logger = logging.getLogger(__name__)

# Module-level instances for lifecycle management
_solr_client: SolrClient | None = None
_posthog_client: Posthog | None = None


def get_solr_client(settings: Settings = Depends(get_settings)) -> SolrClient:
    """Get the shared Solr client.

    Args:
        settings: Application settings

    Returns:
        SolrClient: Client bound to the configured Solr core

    Raises:
        ConfigurationError: If the Solr URL or core is blank
    """
    global _solr_client

    if _solr_client is None:
        if not settings.solr_url or not settings.solr_core:
            raise ConfigurationError(
                "SOLR_URL and SOLR_CORE must both be set",
                details={"solr_url": settings.solr_url, "solr_core": settings.solr_core},
            )
        _solr_client = SolrClient(
            base_url=settings.solr_url,
            core=settings.solr_core,
            timeout=settings.solr_timeout,
        )
        logger.info(f"Solr client initialized: {_solr_client.core_url}")

    return _solr_client


async def close_solr_client() -> None:
    """Close the Solr client's HTTP connections."""
    global _solr_client
    if _solr_client:
        await _solr_client.close()
        _solr_client = None


def get_resolver(
    settings: Settings = Depends(get_settings),
    solr_client: SolrClient = Depends(get_solr_client),
) -> Resolver:
    """Build a resolver for the current request."""
    return Resolver(solr=solr_client, site_url=settings.site_url)


def get_posthog_client(settings: Settings = Depends(get_settings)) -> Posthog | None:
    """Get PostHog client instance.

    Args:
        settings: Application settings

    Returns:
        Optional[Posthog]: PostHog client if configured and enabled, None otherwise
    """
    global _posthog_client

    if not settings.enable_telemetry:
        logger.debug("Telemetry disabled")
        return None

    if not settings.posthog_api_key:
        logger.debug("POSTHOG_API_KEY not set - telemetry disabled")
        return None

    if _posthog_client is None:
        _posthog_client = Posthog(
            project_api_key=settings.posthog_api_key,
            host=settings.posthog_host,
        )
        logger.info(f"PostHog client initialized (host: {settings.posthog_host})")

    return _posthog_client


def flush_posthog() -> None:
    """Flush any buffered PostHog events."""
    if _posthog_client:
        _posthog_client.flush()


def shutdown_posthog() -> None:
    """Shutdown PostHog client gracefully."""
    global _posthog_client
    if _posthog_client:
        _posthog_client.shutdown()
        _posthog_client = None
        logger.info("PostHog client shutdown")
