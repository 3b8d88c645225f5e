import math
from enum import Enum

from pydantic import BaseModel


class Continent(str, Enum):
    """The six continents a city or guess can be classified into."""

    EUROPE = "Europe"
    ASIA = "Asia"
    AFRICA = "Africa"
    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    OCEANIA = "Oceania"


class Coordinate(BaseModel):
    """A point on the globe in decimal degrees.

    Range checks are not enforced on construction: a guess coming from a map
    widget may be malformed and still has to be scored (as a miss).
    """

    latitude: float
    longitude: float

    class Config:
        frozen = True

    @property
    def is_valid(self) -> bool:
        """True when both components are finite and inside their ranges."""
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0
