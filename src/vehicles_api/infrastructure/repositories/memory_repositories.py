"""In-memory repository implementations for testing and development."""

import asyncio
import copy
from typing import Dict, List, Optional

from ...application.ports.repositories import CarRepository
from ...domain.entities.car import Car


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository.

    Stored cars are copies, so enrichment applied to a returned car never
    leaks back into the store.
    """

    def __init__(self):
        self._cars: Dict[int, Car] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def save(self, car: Car) -> Car:
        """Save a car."""
        async with self._lock:
            if not car.is_persisted:
                self._last_id += 1
                car.assign_id(self._last_id)
            else:
                self._last_id = max(self._last_id, car.id)
            self._cars[car.id] = copy.deepcopy(car)
        return car

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        """Find car by ID."""
        car = self._cars.get(car_id)
        return copy.deepcopy(car) if car is not None else None

    async def find_all(self) -> List[Car]:
        """Find all cars."""
        return [copy.deepcopy(self._cars[car_id]) for car_id in sorted(self._cars)]

    async def delete(self, car_id: int) -> bool:
        """Delete a car."""
        async with self._lock:
            if car_id in self._cars:
                del self._cars[car_id]
                return True
        return False
