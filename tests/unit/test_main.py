"""Unit tests for main.py."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from tests.factories import override_deps


class TestLifespan:
    @pytest.mark.asyncio
    async def test_shutdown_calls_cleanup(self):
        """Lifespan context manager calls shutdown functions on exit."""
        from main import app, lifespan

        with (
            patch("main.shutdown_posthog") as mock_ph_shutdown,
            patch("main.close_solr_client", new_callable=AsyncMock) as mock_solr_close,
        ):
            async with lifespan(app):
                pass

            mock_ph_shutdown.assert_called_once()
            mock_solr_close.assert_called_once()


class TestMiddleware:
    @pytest.mark.asyncio
    async def test_posthog_flush_middleware(self, mock_settings):
        """PostHog flush middleware flushes after each request."""
        from config.settings import get_settings
        from main import app

        with override_deps(app, {get_settings: mock_settings}):
            with patch("main.flush_posthog") as mock_flush:
                async with AsyncClient(
                    transport=ASGITransport(app=app), base_url="http://test"
                ) as client:
                    await client.get("/api/aries")

                mock_flush.assert_called()


class TestAppRouterRegistration:
    def test_routes_registered(self):
        from main import app

        paths = app.openapi()["paths"]
        assert "/api/aries" in paths
        assert "/api/aries/{identifier}" in paths
        assert "/version" in paths
        assert "/healthcheck" in paths

    @pytest.mark.asyncio
    async def test_unlisted_favicon_route_served(self):
        from main import app

        assert "/favicon.ico" not in app.openapi()["paths"]
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            resp = await client.get("/favicon.ico")
        assert resp.status_code == 204

    def test_app_metadata(self):
        from main import app

        assert app.title is not None
        assert app.version is not None
