"""SQLAlchemy repository implementations."""

from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger, log_database_operation
from ..database.models import CarModel
from ...application.ports.repositories import CarRepository
from ...domain.entities.car import Car
from ...domain.value_objects.car_details import CarDetails
from ...domain.value_objects.location import Location


class SQLAlchemyCarRepository(CarRepository):
    """SQLAlchemy implementation of car repository."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._logger = get_logger(__name__)

    async def save(self, car: Car) -> Car:
        """Save a car to the database."""
        existing_car = None
        if car.is_persisted:
            stmt = select(CarModel).where(CarModel.id == car.id)
            result = await self._session.execute(stmt)
            existing_car = result.scalar_one_or_none()

        if existing_car:
            log_database_operation(self._logger, "UPDATE", CarModel.__tablename__, car_id=car.id)
            car_model = existing_car
        else:
            log_database_operation(self._logger, "INSERT", CarModel.__tablename__)
            car_model = CarModel(id=car.id, created_at=car.created_at)
            self._session.add(car_model)

        self._apply_entity(car_model, car)
        await self._session.flush()

        # Autoincrement ID is available after flush
        if not car.is_persisted:
            car.assign_id(car_model.id)
        return car

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        """Find car by ID."""
        stmt = select(CarModel).where(CarModel.id == car_id)
        result = await self._session.execute(stmt)
        car_model = result.scalar_one_or_none()

        if not car_model:
            return None

        return self._model_to_entity(car_model)

    async def find_all(self) -> List[Car]:
        """Find all cars."""
        stmt = select(CarModel).order_by(CarModel.id)
        result = await self._session.execute(stmt)
        car_models = result.scalars().all()

        return [self._model_to_entity(model) for model in car_models]

    async def delete(self, car_id: int) -> bool:
        """Delete a car."""
        log_database_operation(self._logger, "DELETE", CarModel.__tablename__, car_id=car_id)
        stmt = delete(CarModel).where(CarModel.id == car_id)
        result = await self._session.execute(stmt)

        return result.rowcount > 0

    def _apply_entity(self, model: CarModel, car: Car) -> None:
        """Copy entity state onto a database model."""
        details = car.details
        model.make = details.make
        model.model = details.model
        model.condition = car.condition
        model.body = details.body
        model.model_year = details.model_year
        model.production_year = details.production_year
        model.mileage = details.mileage
        model.number_of_doors = details.number_of_doors
        model.fuel_type = details.fuel_type
        model.engine = details.engine
        model.external_color = details.external_color
        model.lat = car.location.lat if car.location else None
        model.lon = car.location.lon if car.location else None
        model.modified_at = car.modified_at

    def _model_to_entity(self, model: CarModel) -> Car:
        """Convert database model to domain entity."""
        location = None
        if model.lat is not None and model.lon is not None:
            location = Location(lat=model.lat, lon=model.lon)

        return Car(
            details=CarDetails(
                make=model.make,
                model=model.model,
                body=model.body,
                model_year=model.model_year,
                production_year=model.production_year,
                mileage=model.mileage,
                number_of_doors=model.number_of_doors,
                fuel_type=model.fuel_type,
                engine=model.engine,
                external_color=model.external_color
            ),
            condition=model.condition,
            location=location,
            car_id=model.id,
            created_at=model.created_at,
            modified_at=model.modified_at
        )
