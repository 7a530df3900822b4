"""Dependency Injection Container.

Wires settings, the shared ``httpx.Client`` and the loader together using
dependency-injector. Tests override ``http_client`` to inject a fake transport.

Usage::

    from esfixtures.container import AppContainer

    container = AppContainer()
    loader = container.fixture_loader("fixtures/orders.json", "fixtures/users.json")
    loader.load()
    container.shutdown_resources()
"""

import httpx
from dependency_injector import containers, providers

from esfixtures.clients.search_client import SearchServiceClient
from esfixtures.config import Settings
from esfixtures.services.fixture_loader import FixtureLoader


def _http_client(timeout: float):
    """Yield one client for the container's lifetime and close it on shutdown."""
    client = httpx.Client(timeout=timeout)
    try:
        yield client
    finally:
        client.close()


class AppContainer(containers.DeclarativeContainer):
    """Application Dependency Injection Container."""

    settings = providers.Singleton(Settings)

    # ══════════════════════════════════════════════════════════════════
    # EXTERNAL CLIENTS (Infrastructure)
    # ══════════════════════════════════════════════════════════════════

    http_client = providers.Resource(
        _http_client,
        timeout=settings.provided.request_timeout,
    )

    search_client = providers.Factory(
        SearchServiceClient,
        base_url=settings.provided.service_url,
        http_client=http_client,
    )

    # ══════════════════════════════════════════════════════════════════
    # SERVICES
    # ══════════════════════════════════════════════════════════════════

    # File names are passed at call time and follow the service URL.
    fixture_loader = providers.Factory(
        FixtureLoader,
        settings.provided.service_url,
        http_client=http_client,
    )
