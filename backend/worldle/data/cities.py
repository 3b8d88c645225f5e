"""The fixed city catalog.

Order matters: daily selection indexes into this tuple, so reordering,
inserting or removing entries changes every future daily city.
"""

from ..models.city import City
from ..models.geo import Continent, Coordinate


def _city(name: str, country: str, continent: Continent, latitude: float, longitude: float) -> City:
    return City(
        name=name,
        country=country,
        continent=continent,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
    )


CITY_CATALOG: tuple[City, ...] = (
    _city("Paris", "France", Continent.EUROPE, 48.8566, 2.3522),
    _city("Tokyo", "Japan", Continent.ASIA, 35.6762, 139.6503),
    _city("New York", "United States", Continent.NORTH_AMERICA, 40.7128, -74.0060),
    _city("London", "United Kingdom", Continent.EUROPE, 51.5074, -0.1278),
    _city("Sydney", "Australia", Continent.OCEANIA, -33.8688, 151.2093),
    _city("Rio de Janeiro", "Brazil", Continent.SOUTH_AMERICA, -22.9068, -43.1729),
    _city("Cairo", "Egypt", Continent.AFRICA, 30.0444, 31.2357),
    _city("Mumbai", "India", Continent.ASIA, 19.0760, 72.8777),
    _city("Moscow", "Russia", Continent.EUROPE, 55.7558, 37.6176),
    _city("Cape Town", "South Africa", Continent.AFRICA, -33.9249, 18.4241),
    _city("Bangkok", "Thailand", Continent.ASIA, 13.7563, 100.5018),
    _city("Mexico City", "Mexico", Continent.NORTH_AMERICA, 19.4326, -99.1332),
    _city("Istanbul", "Turkey", Continent.ASIA, 41.0082, 28.9784),
    _city("Beijing", "China", Continent.ASIA, 39.9042, 116.4074),
    _city("Lagos", "Nigeria", Continent.AFRICA, 6.5244, 3.3792),
    _city("São Paulo", "Brazil", Continent.SOUTH_AMERICA, -23.5505, -46.6333),
    _city("Singapore", "Singapore", Continent.ASIA, 1.3521, 103.8198),
    _city("Dubai", "United Arab Emirates", Continent.ASIA, 25.2048, 55.2708),
    _city("Toronto", "Canada", Continent.NORTH_AMERICA, 43.6532, -79.3832),
    _city("Buenos Aires", "Argentina", Continent.SOUTH_AMERICA, -34.6118, -58.3960),
    _city("Reykjavik", "Iceland", Continent.EUROPE, 64.1466, -21.9426),
    _city("Perth", "Australia", Continent.OCEANIA, -31.9505, 115.8605),
    _city("Anchorage", "United States", Continent.NORTH_AMERICA, 61.2181, -149.9003),
    _city("Ushuaia", "Argentina", Continent.SOUTH_AMERICA, -54.8019, -68.3030),
)
