from typing import Optional

from ..data.continents import CONTINENT_BOUNDS, COUNTRY_CONTINENTS, COUNTRY_CONTINENTS_LOWER
from ..models.geo import Continent, Coordinate


def continent_for_country(country: Optional[str]) -> Optional[Continent]:
    """Look up a country name, exact case first and then case-insensitively."""
    if not country:
        return None
    continent = COUNTRY_CONTINENTS.get(country)
    if continent is not None:
        return continent
    return COUNTRY_CONTINENTS_LOWER.get(country.strip().lower())


def continent_for_coordinate(coordinate: Coordinate) -> Optional[Continent]:
    """Classify a coordinate by the first continent bounding box containing it."""
    for box in CONTINENT_BOUNDS:
        if box.contains(coordinate.latitude, coordinate.longitude):
            return box.continent
    return None


def resolve_continent(country: Optional[str], coordinate: Optional[Coordinate]) -> Optional[Continent]:
    """
    Resolve a continent from a reverse-geocoding result.

    The country table is authoritative; the bounding boxes are only consulted
    when the country is missing or unknown. Returns None for points that fall
    in no box (open ocean, polar regions).
    """
    continent = continent_for_country(country)
    if continent is None and coordinate is not None:
        continent = continent_for_coordinate(coordinate)
    return continent
