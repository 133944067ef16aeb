"""Port interfaces for repositories (Dependency Inversion Principle)."""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.entities.car import Car


class CarRepository(ABC):
    """Port interface for car repository."""

    @abstractmethod
    async def save(self, car: "Car") -> "Car":
        """Save a car, assigning an ID when it has none."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, car_id: int) -> Optional["Car"]:
        """Find car by ID."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> List["Car"]:
        """Find all cars ordered by ID."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        """Delete a car. Returns False when no car had that ID."""
        raise NotImplementedError
