"""Location value objects for vehicle positioning."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Street address resolved by the location lookup service."""

    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


@dataclass(frozen=True)
class Location:
    """Immutable value object representing where a vehicle is parked."""

    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate coordinates."""
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")

    @property
    def has_address(self) -> bool:
        """Check if the street address has been resolved."""
        return self.address is not None

    def with_address(self, address: Address) -> "Location":
        """Create a new Location carrying the resolved address."""
        return replace(
            self,
            address=address.address,
            city=address.city,
            state=address.state,
            zip=address.zip
        )
