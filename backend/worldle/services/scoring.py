from math import radians, sin, cos, sqrt, atan2, isfinite
from typing import NamedTuple

from ..models.city import City
from ..models.geo import Coordinate
from ..models.score import ScoreCategory
from ..utils.logger import format_coordinate, get_logger
from .continents import resolve_continent
from .geocoding import ReverseGeocoder

logger = get_logger(__name__)

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Inputs are not validated: out-of-range coordinates give a meaningless
    distance and non-finite ones give NaN, never an exception.

    Args:
        lat1, lon1: Coordinates of the first point (degrees)
        lat2, lon2: Coordinates of the second point (degrees)

    Returns:
        Distance in kilometers
    """
    if not all(isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        return float("nan")

    # Convert coordinates to radians
    lat1_rad = radians(lat1)
    lon1_rad = radians(lon1)
    lat2_rad = radians(lat2)
    lon2_rad = radians(lon2)

    # Haversine formula
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = sin(dlat / 2)**2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2)**2
    # Rounding can push a just outside [0, 1]
    a = min(max(a, 0.0), 1.0)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


class ScoreResult(NamedTuple):
    distance_km: float
    category: ScoreCategory

    @property
    def score(self) -> int:
        return self.category.points


class ScoreEngine:
    """Turns a guess and a target city into a distance and a score category."""

    def __init__(
        self,
        geocoder: ReverseGeocoder,
        perfect_distance_km: float = 15.0,
        excellent_distance_km: float = 100.0,
    ):
        self.geocoder = geocoder
        self.perfect_distance_km = perfect_distance_km
        self.excellent_distance_km = excellent_distance_km

    async def evaluate(self, guess: Coordinate, target: City) -> ScoreResult:
        """
        Score a guess against the target city.

        Tiers are tried strictest first: distance thresholds, then country and
        continent containment through a reverse geocoding lookup. A failed
        lookup scores as a miss and is only logged.
        """
        distance = distance_km(guess, target.coordinate)

        # Checked after the distance so a rejected guess still reports it
        if not guess.is_valid:
            return ScoreResult(distance, ScoreCategory.MISS)

        if distance <= self.perfect_distance_km:
            return ScoreResult(distance, ScoreCategory.PERFECT)
        if distance <= self.excellent_distance_km:
            return ScoreResult(distance, ScoreCategory.EXCELLENT)

        return ScoreResult(distance, await self._containment_category(guess, target))

    async def _containment_category(self, guess: Coordinate, target: City) -> ScoreCategory:
        try:
            location = await self.geocoder.reverse_geocode(guess)
        except Exception as e:
            logger.warning(
                "reverse_geocoding_failed",
                coordinate=format_coordinate(guess.latitude, guess.longitude),
                error=str(e),
            )
            return ScoreCategory.MISS

        continent = resolve_continent(location.country, location.coordinate)
        logger.debug(
            "reverse_geocoding_result",
            coordinate=format_coordinate(guess.latitude, guess.longitude),
            country=location.country,
            continent=continent.value if continent else None,
            target=f"{target.name}, {target.country} ({target.continent.value})",
        )

        if location.country and location.country.lower() == target.country.lower():
            return ScoreCategory.SAME_COUNTRY
        if continent is not None and continent.value.lower() == target.continent.value.lower():
            return ScoreCategory.SAME_CONTINENT
        return ScoreCategory.MISS
