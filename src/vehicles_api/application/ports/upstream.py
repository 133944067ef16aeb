"""Port interfaces for upstream services that enrich car records."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.value_objects.location import Address


class LocationProvider(ABC):
    """Port interface for the location lookup service."""

    @abstractmethod
    async def get_address(self, lat: float, lon: float) -> "Address":
        """Resolve coordinates into a street address."""
        raise NotImplementedError


class PriceProvider(ABC):
    """Port interface for the pricing service."""

    @abstractmethod
    async def get_price(self, car_id: int) -> str:
        """Get the formatted price quote for a car."""
        raise NotImplementedError
