"""Assembly of hypermedia envelopes for car resources.

Links are expanded from route templates by plain string substitution, so the
same car ID always yields the same self link.
"""

from typing import Dict, Iterable
from urllib.parse import quote

from ...domain.entities.car import Car
from .schemas.car_schemas import (
    CarCollectionResource,
    CarListEmbedded,
    CarResource,
    Link,
    LocationResponse,
)

CARS_COLLECTION_TEMPLATE = "/cars"
CAR_ITEM_TEMPLATE = "/cars/{car_id}"

SELF_REL = "self"
CARS_REL = "cars"


class LinkBuildError(RuntimeError):
    """Raised when a canonical URL cannot be built for a resource."""


def build_link(template: str, base_url: str = "", **params: object) -> str:
    """Expand a route template into an href.

    >>> build_link("/cars/{car_id}", car_id=42)
    '/cars/42'
    """
    if any(value is None for value in params.values()):
        missing = ", ".join(name for name, value in params.items() if value is None)
        raise LinkBuildError(f"Cannot build link from {template!r}: no value for {missing}")
    try:
        path = template.format(**{name: quote(str(value), safe="") for name, value in params.items()})
    except (KeyError, IndexError) as exc:
        raise LinkBuildError(f"Cannot build link from {template!r}: missing parameter {exc}") from exc
    return f"{base_url.rstrip('/')}{path}"


def car_links(
    car_id: int,
    item_template: str = CAR_ITEM_TEMPLATE,
    collection_template: str = CARS_COLLECTION_TEMPLATE,
    base_url: str = "",
) -> Dict[str, Link]:
    """Links attached to a single car: itself and the collection."""
    return {
        SELF_REL: Link(href=build_link(item_template, base_url, car_id=car_id)),
        CARS_REL: Link(href=build_link(collection_template, base_url)),
    }


def to_resource(
    car: Car,
    item_template: str = CAR_ITEM_TEMPLATE,
    collection_template: str = CARS_COLLECTION_TEMPLATE,
    base_url: str = "",
) -> CarResource:
    """Wrap a car in an envelope with its self link."""
    if not car.is_persisted:
        raise LinkBuildError("Cannot build self link for a car without an ID")

    details = car.details
    location = None
    if car.location is not None:
        location = LocationResponse(
            lat=car.location.lat,
            lon=car.location.lon,
            address=car.location.address,
            city=car.location.city,
            state=car.location.state,
            zip=car.location.zip,
        )

    return CarResource(
        id=car.id,
        make=details.make,
        model=details.model,
        condition=car.condition,
        body=details.body,
        model_year=details.model_year,
        production_year=details.production_year,
        mileage=details.mileage,
        number_of_doors=details.number_of_doors,
        fuel_type=details.fuel_type,
        engine=details.engine,
        external_color=details.external_color,
        location=location,
        price=car.price,
        created_at=car.created_at,
        modified_at=car.modified_at,
        links=car_links(car.id, item_template, collection_template, base_url),
    )


def to_collection(
    cars: Iterable[Car],
    item_template: str = CAR_ITEM_TEMPLATE,
    collection_template: str = CARS_COLLECTION_TEMPLATE,
    base_url: str = "",
) -> CarCollectionResource:
    """Wrap cars in a collection envelope with one collection-level self link."""
    resources = [to_resource(car, item_template, collection_template, base_url) for car in cars]
    return CarCollectionResource(
        embedded=CarListEmbedded(car_list=resources),
        links={SELF_REL: Link(href=build_link(collection_template, base_url))},
    )
