"""Unit tests for car repository implementations."""

import asyncio
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from vehicles_api.application.ports.repositories import CarRepository
from vehicles_api.domain.entities.car import Car, Condition
from vehicles_api.domain.value_objects.car_details import CarDetails
from vehicles_api.domain.value_objects.location import Location
from vehicles_api.infrastructure.database.models import CarModel
from vehicles_api.infrastructure.repositories.memory_repositories import InMemoryCarRepository
from vehicles_api.infrastructure.repositories.sql_repositories import SQLAlchemyCarRepository

# Mark all async tests in this module
pytestmark = pytest.mark.asyncio


def make_car(car_id=None, model="Malibu") -> Car:
    return Car(
        details=CarDetails(make="Chevrolet", model=model, mileage=32280),
        location=Location(lat=40.73061, lon=-73.935242),
        car_id=car_id
    )


class TestInMemoryCarRepository:
    """Test cases for InMemoryCarRepository."""

    async def test_implements_port(self):
        """Test repository implements the port interface."""
        assert isinstance(InMemoryCarRepository(), CarRepository)

    async def test_save_assigns_sequential_ids(self):
        """Test IDs are assigned in order starting at 1."""
        repository = InMemoryCarRepository()

        first = await repository.save(make_car())
        second = await repository.save(make_car())

        assert (first.id, second.id) == (1, 2)

    async def test_concurrent_saves_get_unique_ids(self):
        """Test concurrent saves never share an ID."""
        repository = InMemoryCarRepository()

        cars = await asyncio.gather(*(repository.save(make_car()) for _ in range(20)))

        assert sorted(car.id for car in cars) == list(range(1, 21))

    async def test_ids_not_reused_after_delete(self):
        """Test deleting the newest car does not recycle its ID."""
        repository = InMemoryCarRepository()
        first = await repository.save(make_car())
        await repository.delete(first.id)

        second = await repository.save(make_car())

        assert second.id == 2

    async def test_find_by_id_returns_copy(self):
        """Test mutating a returned car does not change the store."""
        repository = InMemoryCarRepository()
        saved = await repository.save(make_car())

        found = await repository.find_by_id(saved.id)
        found.attach_price("USD 1.00")

        assert (await repository.find_by_id(saved.id)).price is None

    async def test_find_missing_returns_none(self):
        """Test missing car yields None."""
        assert await InMemoryCarRepository().find_by_id(1) is None

    async def test_find_all_ordered_by_id(self):
        """Test cars are listed by ascending ID."""
        repository = InMemoryCarRepository()
        await repository.save(make_car(car_id=5))
        await repository.save(make_car(car_id=2))

        cars = await repository.find_all()

        assert [car.id for car in cars] == [2, 5]

    async def test_save_with_id_overwrites(self):
        """Test saving a car with an existing ID replaces it."""
        repository = InMemoryCarRepository()
        saved = await repository.save(make_car())

        await repository.save(make_car(car_id=saved.id, model="Impala"))

        cars = await repository.find_all()
        assert len(cars) == 1
        assert cars[0].details.model == "Impala"

    async def test_delete(self):
        """Test delete reports whether a car was removed."""
        repository = InMemoryCarRepository()
        saved = await repository.save(make_car())

        assert await repository.delete(saved.id) is True
        assert await repository.delete(saved.id) is False


class TestSQLAlchemyCarRepository:
    """Test cases for SQLAlchemyCarRepository against a mocked session."""

    @pytest.fixture
    def session(self):
        """Create mock async session."""
        session = MagicMock()
        session.execute = AsyncMock()
        session.flush = AsyncMock()
        return session

    def _result(self, value):
        result = MagicMock()
        result.scalar_one_or_none.return_value = value
        result.scalars.return_value.all.return_value = value if isinstance(value, list) else [value]
        return result

    def _model(self, car_id=1, lat=40.73061, lon=-73.935242) -> CarModel:
        timestamp = datetime(2024, 5, 1, tzinfo=timezone.utc)
        return CarModel(
            id=car_id, make="Chevrolet", model="Malibu", condition=Condition.NEW,
            body="sedan", model_year=2018, mileage=32280, lat=lat, lon=lon,
            created_at=timestamp, modified_at=timestamp
        )

    async def test_save_new_car_assigns_generated_id(self, session):
        """Test insert adds a model and takes the ID produced by the flush."""
        added = []
        session.add.side_effect = added.append

        async def flush():
            added[0].id = 17

        session.flush.side_effect = flush
        repository = SQLAlchemyCarRepository(session)
        car = make_car()

        saved = await repository.save(car)

        assert saved.id == 17
        assert added[0].make == "Chevrolet"
        assert added[0].lat == 40.73061
        session.execute.assert_not_called()

    async def test_save_existing_car_updates_model(self, session):
        """Test update copies entity state onto the stored row."""
        stored = self._model(car_id=3)
        session.execute.return_value = self._result(stored)
        repository = SQLAlchemyCarRepository(session)

        await repository.save(make_car(car_id=3, model="Impala"))

        assert stored.model == "Impala"
        assert stored.condition == Condition.USED
        session.add.assert_not_called()
        session.flush.assert_awaited_once()

    async def test_find_by_id_maps_model_to_entity(self, session):
        """Test database row is converted to a car."""
        session.execute.return_value = self._result(self._model(car_id=3))
        repository = SQLAlchemyCarRepository(session)

        car = await repository.find_by_id(3)

        assert car.id == 3
        assert car.details.body == "sedan"
        assert car.condition == Condition.NEW
        assert car.location == Location(lat=40.73061, lon=-73.935242)
        assert car.created_at == datetime(2024, 5, 1, tzinfo=timezone.utc)

    async def test_find_by_id_missing(self, session):
        """Test missing row yields None."""
        session.execute.return_value = self._result(None)

        assert await SQLAlchemyCarRepository(session).find_by_id(3) is None

    async def test_row_without_coordinates_has_no_location(self, session):
        """Test a row with null coordinates maps to a car without location."""
        session.execute.return_value = self._result([self._model(lat=None, lon=None)])

        cars = await SQLAlchemyCarRepository(session).find_all()

        assert cars[0].location is None

    async def test_delete_uses_rowcount(self, session):
        """Test delete reports whether a row was removed."""
        session.execute.return_value = MagicMock(rowcount=0)

        assert await SQLAlchemyCarRepository(session).delete(3) is False
