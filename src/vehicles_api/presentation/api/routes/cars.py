"""Car endpoints.

Routes are registered from the ``ROUTES`` table below. Request bodies are
parsed into ``CarRequest`` before a handler runs, so handlers only see
well-formed payloads.
"""

from dataclasses import dataclass
from typing import Any, AsyncGenerator, Callable, Dict, Optional, Type

from fastapi import APIRouter, Depends, Path, Response, status

from ....application.services.car_service import CarService
from ....infrastructure.services import get_service_factory
from ..assembler import to_collection, to_resource
from ..config import Settings, get_settings
from ..schemas.car_schemas import CarCollectionResource, CarRequest, CarResource, ErrorResponse

router = APIRouter()

ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse,
        "description": "This is a bad request, please follow the API documentation for the proper request format.",
    },
    status.HTTP_401_UNAUTHORIZED: {
        "model": ErrorResponse,
        "description": "Due to security constraints, your access request cannot be authorized.",
    },
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse,
        "description": "The server is down. Please make sure that the Location microservice is running.",
    },
}


async def get_car_service() -> AsyncGenerator[CarService, None]:
    """Provide a car service for the duration of one request."""
    async with get_service_factory().get_car_service() as service:
        yield service


async def list_cars(
    service: CarService = Depends(get_car_service),
    settings: Settings = Depends(get_settings)
) -> CarCollectionResource:
    """List all vehicles."""
    cars = await service.list()
    return to_collection(cars, base_url=settings.public_base_url)


async def get_car(
    car_id: int = Path(..., ge=1, description="The ID number of the vehicle"),
    service: CarService = Depends(get_car_service),
    settings: Settings = Depends(get_settings)
) -> CarResource:
    """Get all information for the requested vehicle."""
    car = await service.find_by_id(car_id)
    return to_resource(car, base_url=settings.public_base_url)


async def create_car(
    payload: CarRequest,
    response: Response,
    service: CarService = Depends(get_car_service),
    settings: Settings = Depends(get_settings)
) -> CarResource:
    """Add a vehicle. The Location header points at the new vehicle."""
    saved = await service.save(payload.to_entity())
    resource = to_resource(saved, base_url=settings.public_base_url)
    response.headers["Location"] = resource.self_href
    return resource


async def update_car(
    payload: CarRequest,
    response: Response,
    car_id: int = Path(..., ge=1, description="The ID number of the vehicle"),
    service: CarService = Depends(get_car_service),
    settings: Settings = Depends(get_settings)
) -> CarResource:
    """Update a vehicle. The path ID overrides any ID in the body."""
    car = payload.to_entity()
    car.assign_id(car_id)
    saved = await service.save(car)
    resource = to_resource(saved, base_url=settings.public_base_url)
    response.headers["Location"] = resource.self_href
    return resource


async def delete_car(
    car_id: int = Path(..., ge=1, description="The ID number of the vehicle"),
    service: CarService = Depends(get_car_service)
) -> Response:
    """Remove a vehicle."""
    await service.delete(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@dataclass(frozen=True)
class RouteSpec:
    """One entry of the route table."""
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    summary: str
    response_model: Optional[Type[Any]] = None


ROUTES = (
    RouteSpec("GET", "", list_cars, status.HTTP_200_OK, "Get all vehicles", CarCollectionResource),
    RouteSpec("GET", "/{car_id}", get_car, status.HTTP_200_OK, "Get vehicle by ID", CarResource),
    RouteSpec("POST", "", create_car, status.HTTP_201_CREATED, "Add a vehicle", CarResource),
    RouteSpec("PUT", "/{car_id}", update_car, status.HTTP_201_CREATED, "Update a vehicle by ID", CarResource),
    RouteSpec("DELETE", "/{car_id}", delete_car, status.HTTP_204_NO_CONTENT, "Delete a vehicle by ID"),
)

for route in ROUTES:
    router.add_api_route(
        route.path,
        route.endpoint,
        methods=[route.method],
        status_code=route.status_code,
        response_model=route.response_model,
        summary=route.summary,
        responses=ERROR_RESPONSES,
    )
