"""Pydantic schemas for car API requests and responses."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ....domain.entities.car import Car, Condition
from ....domain.value_objects.car_details import CarDetails
from ....domain.value_objects.location import Location


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while accepting snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class LocationPayload(CamelModel):
    """Location supplied by a client."""
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")


class CarRequest(CamelModel):
    """Request model for creating or updating a car.

    Read-only fields (price, timestamps, resolved address) are ignored. An
    ``id`` in the body is accepted but never trusted: creation always gets a
    new ID and updates use the ID from the path.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(None, description="Ignored; the path ID wins on update")
    make: str = Field(..., min_length=1, max_length=50, description="Manufacturer, e.g. Chevrolet")
    model: str = Field(..., min_length=1, max_length=50, description="Model name, e.g. Malibu")
    condition: Condition = Field(Condition.USED, description="NEW or USED")
    body: Optional[str] = Field(None, max_length=50, description="Body style, e.g. sedan")
    model_year: Optional[int] = Field(None, ge=1886, le=2100)
    production_year: Optional[int] = Field(None, ge=1886, le=2100)
    mileage: Optional[int] = Field(None, ge=0)
    number_of_doors: Optional[int] = Field(None, ge=1, le=10)
    fuel_type: Optional[str] = Field(None, max_length=30)
    engine: Optional[str] = Field(None, max_length=50)
    external_color: Optional[str] = Field(None, max_length=30)
    location: Optional[LocationPayload] = None

    @field_validator("make", "model")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank names."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    def to_entity(self) -> Car:
        """Build a new, unsaved car from the payload."""
        location = None
        if self.location is not None:
            location = Location(lat=self.location.lat, lon=self.location.lon)

        return Car(
            details=CarDetails(
                make=self.make,
                model=self.model,
                body=self.body,
                model_year=self.model_year,
                production_year=self.production_year,
                mileage=self.mileage,
                number_of_doors=self.number_of_doors,
                fuel_type=self.fuel_type,
                engine=self.engine,
                external_color=self.external_color
            ),
            condition=self.condition,
            location=location
        )


class Link(BaseModel):
    """Hypermedia link."""
    href: str


class LocationResponse(CamelModel):
    """Location with the street address when it has been resolved."""
    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class CarResource(CamelModel):
    """Car envelope: the car's fields plus navigational links."""
    id: int
    make: str
    model: str
    condition: Condition
    body: Optional[str] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    mileage: Optional[int] = None
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    external_color: Optional[str] = None
    location: Optional[LocationResponse] = None
    price: Optional[str] = None
    created_at: datetime
    modified_at: datetime
    links: Dict[str, Link] = Field(..., alias="_links")

    @property
    def self_href(self) -> str:
        """Get the canonical URL of this car."""
        return self.links["self"].href


class CarListEmbedded(CamelModel):
    """Embedded cars of a collection envelope."""
    car_list: List[CarResource] = Field(default_factory=list)


class CarCollectionResource(CamelModel):
    """Collection envelope with a single collection-level self link."""
    embedded: CarListEmbedded = Field(..., alias="_embedded")
    links: Dict[str, Link] = Field(..., alias="_links")


class ErrorResponse(BaseModel):
    """Response model for errors."""
    detail: str
    type: str
    errors: Optional[List[Dict[str, Any]]] = None
