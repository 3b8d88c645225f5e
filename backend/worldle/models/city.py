from pydantic import BaseModel

from .geo import Continent, Coordinate


class City(BaseModel):
    """A target city from the fixed catalog."""

    name: str
    country: str
    continent: Continent
    coordinate: Coordinate

    class Config:
        frozen = True

    def __eq__(self, other: object) -> bool:
        # Continent is derived data and does not take part in identity
        if not isinstance(other, City):
            return NotImplemented
        return (
            self.name == other.name
            and self.country == other.country
            and self.coordinate == other.coordinate
        )

    def __hash__(self) -> int:
        return hash((self.name, self.country, self.coordinate.latitude, self.coordinate.longitude))
