"""Car entity for the vehicle inventory."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from ..value_objects.car_details import CarDetails
from ..value_objects.location import Location


class Condition(Enum):
    """Car condition enumeration."""
    USED = "USED"
    NEW = "NEW"


def utc_now() -> datetime:
    """Get the current timestamp in UTC."""
    return datetime.now(timezone.utc)


class Car:
    """Car entity tracked by the inventory.

    The identifier is assigned by the persistence layer; a car built from an
    inbound payload has no id until it is saved or explicitly assigned one.
    Price and the resolved street address are supplied by upstream services
    and are never part of a client payload.
    """

    def __init__(
        self,
        details: CarDetails,
        condition: Condition = Condition.USED,
        location: Optional[Location] = None,
        car_id: Optional[int] = None,
        price: Optional[str] = None,
        created_at: Optional[datetime] = None,
        modified_at: Optional[datetime] = None
    ):
        self._id = car_id
        self._details = details
        self._condition = condition
        self._location = location
        self._price = price
        self._created_at = created_at or utc_now()
        self._modified_at = modified_at or self._created_at

    @property
    def id(self) -> Optional[int]:
        """Get car ID."""
        return self._id

    @property
    def details(self) -> CarDetails:
        """Get descriptive details."""
        return self._details

    @property
    def condition(self) -> Condition:
        """Get car condition."""
        return self._condition

    @property
    def location(self) -> Optional[Location]:
        """Get car location."""
        return self._location

    @property
    def price(self) -> Optional[str]:
        """Get formatted price, e.g. 'USD 12500.00'."""
        return self._price

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def modified_at(self) -> datetime:
        """Get last modification timestamp."""
        return self._modified_at

    @property
    def is_persisted(self) -> bool:
        """Check if the car has been assigned an identifier."""
        return self._id is not None

    def assign_id(self, car_id: int) -> None:
        """Set the identifier of this car."""
        if car_id < 1:
            raise ValueError("Car ID must be a positive integer")
        self._id = car_id

    def replace_with(self, other: "Car") -> None:
        """Take over the client-editable state of another car.

        Identifier and creation timestamp are kept.
        """
        self._details = other.details
        self._condition = other.condition
        self._location = other.location
        self._modified_at = utc_now()

    def attach_price(self, price: str) -> None:
        """Attach a price quoted by the pricing service."""
        self._price = price

    def attach_location(self, location: Location) -> None:
        """Attach a location enriched by the location service."""
        self._location = location

    def __eq__(self, other: object) -> bool:
        """Check equality based on car ID."""
        if not isinstance(other, Car):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on car ID."""
        return hash(self._id) if self._id is not None else id(self)

    def __str__(self) -> str:
        """String representation."""
        return f"Car({self._id}, {self._details.display_name}, {self._condition.value})"
