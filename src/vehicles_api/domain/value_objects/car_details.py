"""Descriptive details of a car."""

from dataclasses import dataclass
from typing import Optional

EARLIEST_MODEL_YEAR = 1886


@dataclass(frozen=True)
class CarDetails:
    """Immutable value object with the descriptive attributes of a car."""

    make: str
    model: str
    body: Optional[str] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    mileage: Optional[int] = None
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    external_color: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate details data."""
        if not self.make or not self.make.strip():
            raise ValueError("Make cannot be empty")
        if not self.model or not self.model.strip():
            raise ValueError("Model cannot be empty")
        if self.mileage is not None and self.mileage < 0:
            raise ValueError("Mileage cannot be negative")
        if self.number_of_doors is not None and self.number_of_doors < 1:
            raise ValueError("Number of doors must be at least 1")
        for label, year in (("Model year", self.model_year), ("Production year", self.production_year)):
            if year is not None and year < EARLIEST_MODEL_YEAR:
                raise ValueError(f"{label} must be {EARLIEST_MODEL_YEAR} or later")

    @property
    def display_name(self) -> str:
        """Get human-readable name, e.g. '2018 Chevrolet Malibu'."""
        if self.model_year:
            return f"{self.model_year} {self.make} {self.model}"
        return f"{self.make} {self.model}"
