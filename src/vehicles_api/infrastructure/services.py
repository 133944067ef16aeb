"""Dependency injection and service factory."""

from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

import httpx

from .clients import MapsClient, PricingClient
from .database.connection import DatabaseManager
from .logging import get_logger
from .repositories.memory_repositories import InMemoryCarRepository
from .repositories.sql_repositories import SQLAlchemyCarRepository
from ..application.services.car_service import CarService
from ..presentation.api.config import Settings, get_settings

logger = get_logger(__name__)


class ServiceFactory:
    """Factory for creating application services with proper dependencies."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self.database_manager: Optional[DatabaseManager] = None
        if settings.database_url:
            self.database_manager = DatabaseManager(
                settings.database_url,
                echo=settings.database_echo,
                pool_pre_ping=settings.db_pool_pre_ping
            )
        # Singleton repository so cars persist across requests without a database
        self._memory_repository = InMemoryCarRepository()
        self._http_client: Optional[httpx.AsyncClient] = None
        self._connected = False

    @property
    def uses_database(self) -> bool:
        """Check if cars are persisted in a database."""
        return self.database_manager is not None

    async def initialize(self) -> None:
        """Initialize the service factory."""
        if self._connected:
            return
        if self.database_manager:
            await self.database_manager.connect()
        self._http_client = httpx.AsyncClient(timeout=self._settings.upstream_timeout_seconds)
        self._connected = True
        logger.info(
            "Service factory initialized (storage=%s, maps=%s, pricing=%s)",
            "database" if self.uses_database else "memory",
            self._settings.maps_url or "disabled",
            self._settings.pricing_url or "disabled",
        )

    async def shutdown(self) -> None:
        """Shutdown the service factory."""
        if not self._connected:
            return
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        if self.database_manager:
            await self.database_manager.disconnect()
        self._connected = False

    def _upstream_clients(self) -> tuple[Optional[MapsClient], Optional[PricingClient]]:
        """Build upstream clients for the configured services."""
        if self._http_client is None:
            return None, None
        maps_client = None
        pricing_client = None
        if self._settings.maps_url:
            maps_client = MapsClient(self._settings.maps_url, self._http_client)
        if self._settings.pricing_url:
            pricing_client = PricingClient(self._settings.pricing_url, self._http_client)
        return maps_client, pricing_client

    @asynccontextmanager
    async def get_car_service(self) -> AsyncGenerator[CarService, None]:
        """Get car service backed by the configured repository."""
        maps_client, pricing_client = self._upstream_clients()

        if self.database_manager is None:
            yield CarService(
                car_repository=self._memory_repository,
                location_provider=maps_client,
                price_provider=pricing_client
            )
            return

        async with self.database_manager.get_session() as session:
            yield CarService(
                car_repository=SQLAlchemyCarRepository(session),
                location_provider=maps_client,
                price_provider=pricing_client
            )


# Global service factory instance
_service_factory: ServiceFactory | None = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory(get_settings())

    return _service_factory


async def initialize_services() -> None:
    """Initialize application services."""
    await get_service_factory().initialize()


async def shutdown_services() -> None:
    """Shutdown application services."""
    await get_service_factory().shutdown()
