"""SQLAlchemy database models."""

from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Integer, Float, Enum as SQLEnum
from sqlalchemy.orm import declarative_base

from ...domain.entities.car import Condition

Base = declarative_base()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CarModel(Base):
    """SQLAlchemy model for cars."""

    __tablename__ = "cars"

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Details
    make = Column(String(50), nullable=False, index=True)
    model = Column(String(50), nullable=False)
    condition = Column(SQLEnum(Condition), nullable=False, default=Condition.USED)
    body = Column(String(50), nullable=True)
    model_year = Column(Integer, nullable=True)
    production_year = Column(Integer, nullable=True)
    mileage = Column(Integer, nullable=True)
    number_of_doors = Column(Integer, nullable=True)
    fuel_type = Column(String(30), nullable=True)
    engine = Column(String(50), nullable=True)
    external_color = Column(String(30), nullable=True)

    # Location; the street address is resolved on read and not stored
    lat = Column(Float, nullable=True)
    lon = Column(Float, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now)
    modified_at = Column(DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now)

    def __repr__(self) -> str:
        return f"<CarModel(id={self.id}, make='{self.make}', model='{self.model}')>"
