"""Pydantic models and the backend selector for nearby queries."""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """Latitude/longitude in degrees. Range is not enforced."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> "Coordinate":
        lat, lng = pair
        return cls(latitude=lat, longitude=lng)


class DbType(str, Enum):
    DOCUMENT = "document"
    RELATIONAL = "relational"

    @classmethod
    def _missing_(cls, value):
        # ODM/ORM names used by existing callers
        aliases = {"mongoose": cls.DOCUMENT, "sequelize": cls.RELATIONAL}
        if isinstance(value, str):
            return aliases.get(value)
        return None


class NearbyConditionOptions(BaseModel):
    latitude: float
    longitude: float
    max_distance: float  # km
    latitude_column_name: str | None = None  # Falls back to settings when empty
    longitude_column_name: str | None = None
