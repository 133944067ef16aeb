"""Car service implementing use cases for the vehicle inventory."""

import logging
from typing import List, Optional

from ..exceptions import CarNotFoundError
from ..ports.repositories import CarRepository
from ..ports.upstream import LocationProvider, PriceProvider
from ...domain.entities.car import Car
from ...infrastructure.logging import get_logger, log_with_extra

logger = get_logger(__name__)


class CarService:
    """Application service for car inventory management."""

    def __init__(
        self,
        car_repository: CarRepository,
        location_provider: Optional[LocationProvider] = None,
        price_provider: Optional[PriceProvider] = None
    ):
        self._car_repository = car_repository
        self._location_provider = location_provider
        self._price_provider = price_provider

    async def list(self) -> List[Car]:
        """Get all cars."""
        return await self._car_repository.find_all()

    async def find_by_id(self, car_id: int) -> Car:
        """Get a car by ID, enriched with price and street address.

        Raises:
            CarNotFoundError: no car has this ID
            UpstreamServiceError: pricing or location lookup is unavailable
        """
        car = await self._car_repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)

        if self._price_provider is not None:
            car.attach_price(await self._price_provider.get_price(car_id))

        if self._location_provider is not None and car.location is not None:
            address = await self._location_provider.get_address(car.location.lat, car.location.lon)
            car.attach_location(car.location.with_address(address))

        return car

    async def save(self, car: Car) -> Car:
        """Create a car, or update the existing car with the same ID.

        Raises:
            CarNotFoundError: the car carries an ID that does not exist
        """
        if not car.is_persisted:
            saved = await self._car_repository.save(car)
            log_with_extra(logger, logging.INFO, f"Created car {saved.id}", car_id=saved.id)
            return saved

        existing = await self._car_repository.find_by_id(car.id)
        if existing is None:
            raise CarNotFoundError(car.id)

        existing.replace_with(car)
        saved = await self._car_repository.save(existing)
        log_with_extra(logger, logging.INFO, f"Updated car {saved.id}", car_id=saved.id)
        return saved

    async def delete(self, car_id: int) -> None:
        """Delete a car by ID.

        Raises:
            CarNotFoundError: no car has this ID
        """
        if not await self._car_repository.delete(car_id):
            raise CarNotFoundError(car_id)
        log_with_extra(logger, logging.INFO, f"Deleted car {car_id}", car_id=car_id)
