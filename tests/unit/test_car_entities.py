"""Unit tests for car entity and value objects."""

import pytest
from datetime import datetime, timezone, timedelta

from vehicles_api.domain.entities.car import Car, Condition
from vehicles_api.domain.value_objects.car_details import CarDetails
from vehicles_api.domain.value_objects.location import Address, Location


class TestCarDetails:
    """Test cases for CarDetails value object."""

    def test_details_creation(self):
        """Test basic details creation."""
        details = CarDetails(make="Chevrolet", model="Malibu", body="sedan", model_year=2018, mileage=32280)

        assert details.make == "Chevrolet"
        assert details.model == "Malibu"
        assert details.body == "sedan"
        assert details.display_name == "2018 Chevrolet Malibu"

    def test_display_name_without_year(self):
        """Test display name when model year is unknown."""
        assert CarDetails(make="Toyota", model="Corolla").display_name == "Toyota Corolla"

    @pytest.mark.parametrize("make,model", [("", "Corolla"), ("   ", "Corolla"), ("Toyota", "")])
    def test_blank_names_rejected(self, make, model):
        """Test make and model must not be blank."""
        with pytest.raises(ValueError):
            CarDetails(make=make, model=model)

    def test_negative_mileage_rejected(self):
        """Test mileage cannot be negative."""
        with pytest.raises(ValueError, match="Mileage"):
            CarDetails(make="Toyota", model="Corolla", mileage=-1)

    def test_zero_doors_rejected(self):
        """Test number of doors must be positive."""
        with pytest.raises(ValueError, match="doors"):
            CarDetails(make="Toyota", model="Corolla", number_of_doors=0)

    def test_ancient_model_year_rejected(self):
        """Test years before the first automobile are rejected."""
        with pytest.raises(ValueError, match="Model year"):
            CarDetails(make="Toyota", model="Corolla", model_year=1800)

    def test_details_are_immutable(self):
        """Test details cannot be modified."""
        details = CarDetails(make="Toyota", model="Corolla")

        with pytest.raises(AttributeError):
            details.make = "Honda"


class TestLocation:
    """Test cases for Location value object."""

    def test_location_without_address(self):
        """Test location with coordinates only."""
        location = Location(lat=40.73061, lon=-73.935242)

        assert location.has_address is False

    @pytest.mark.parametrize("lat,lon", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -181.0)])
    def test_out_of_range_coordinates_rejected(self, lat, lon):
        """Test coordinates outside the valid range are rejected."""
        with pytest.raises(ValueError):
            Location(lat=lat, lon=lon)

    def test_with_address_returns_new_location(self):
        """Test resolving an address keeps coordinates and leaves original untouched."""
        location = Location(lat=40.73061, lon=-73.935242)
        address = Address(address="777 Brockton Avenue", city="Abington", state="MA", zip="2351")

        resolved = location.with_address(address)

        assert resolved.lat == location.lat
        assert resolved.lon == location.lon
        assert resolved.address == "777 Brockton Avenue"
        assert resolved.city == "Abington"
        assert resolved.zip == "2351"
        assert resolved.has_address is True
        assert location.has_address is False


class TestCar:
    """Test cases for Car entity."""

    def _car(self, **kwargs) -> Car:
        return Car(details=CarDetails(make="Chevrolet", model="Malibu"), **kwargs)

    def test_car_defaults(self):
        """Test new car has no ID, USED condition and equal timestamps."""
        car = self._car()

        assert car.id is None
        assert car.is_persisted is False
        assert car.condition == Condition.USED
        assert car.location is None
        assert car.price is None
        assert car.created_at == car.modified_at
        assert car.created_at.tzinfo is not None

    def test_assign_id(self):
        """Test assigning an identifier."""
        car = self._car()

        car.assign_id(42)

        assert car.id == 42
        assert car.is_persisted is True

    @pytest.mark.parametrize("car_id", [0, -5])
    def test_assign_non_positive_id_rejected(self, car_id):
        """Test IDs must be positive."""
        with pytest.raises(ValueError):
            self._car().assign_id(car_id)

    def test_replace_with_keeps_identity_and_creation_time(self):
        """Test replacing editable state keeps ID and created_at."""
        created_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
        car = self._car(car_id=7, created_at=created_at)
        update = Car(
            details=CarDetails(make="Ford", model="Focus"),
            condition=Condition.NEW,
            location=Location(lat=1.0, lon=2.0)
        )

        car.replace_with(update)

        assert car.id == 7
        assert car.created_at == created_at
        assert car.modified_at > created_at
        assert car.details.make == "Ford"
        assert car.condition == Condition.NEW
        assert car.location == Location(lat=1.0, lon=2.0)

    def test_attach_price_and_location(self):
        """Test attaching upstream data."""
        car = self._car(location=Location(lat=1.0, lon=2.0))

        car.attach_price("USD 12500.00")
        car.attach_location(car.location.with_address(Address(city="Abington")))

        assert car.price == "USD 12500.00"
        assert car.location.city == "Abington"

    def test_equality_by_id(self):
        """Test persisted cars compare by ID."""
        assert self._car(car_id=1) == self._car(car_id=1)
        assert self._car(car_id=1) != self._car(car_id=2)
        assert hash(self._car(car_id=1)) == hash(self._car(car_id=1))

    def test_unsaved_cars_are_distinct(self):
        """Test cars without ID are only equal to themselves."""
        car = self._car()

        assert car == car
        assert car != self._car()

    def test_modified_at_defaults_to_created_at(self):
        """Test explicit creation timestamp is reused for modification."""
        created_at = datetime.now(timezone.utc) - timedelta(days=1)

        assert self._car(created_at=created_at).modified_at == created_at

    def test_string_representation(self):
        """Test string representation."""
        assert str(self._car(car_id=3)) == "Car(3, Chevrolet Malibu, USED)"
