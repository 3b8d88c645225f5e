"""Shared fixtures and collaborator fakes for the Worldle tests."""

from datetime import date
from typing import List, Optional

import pytest

from worldle.data.cities import CITY_CATALOG
from worldle.models.geo import Coordinate
from worldle.services.daily import DailyCityService
from worldle.services.geocoding import GeocodingError, ReverseGeocodeResult
from worldle.services.scoring import ScoreEngine
from worldle.services.store import InMemoryPlayedStore

# Day -1 relative to the 2024-01-01 base date selects Paris
PARIS_DAY = date(2023, 12, 31)

PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
BORDEAUX = Coordinate(latitude=44.8378, longitude=-0.5792)
BERLIN = Coordinate(latitude=52.5200, longitude=13.4050)
TOKYO = Coordinate(latitude=35.6762, longitude=139.6503)


class FakeGeocoder:
    """Answers every lookup with a fixed country and records the calls."""

    def __init__(self, country: Optional[str] = None):
        self.country = country
        self.calls: List[Coordinate] = []

    async def reverse_geocode(self, coordinate: Coordinate) -> ReverseGeocodeResult:
        self.calls.append(coordinate)
        return ReverseGeocodeResult(country=self.country, coordinate=coordinate)


class FailingGeocoder:
    def __init__(self, error: Exception = None):
        self.error = error or GeocodingError("Cannot reach geocoder")
        self.calls = 0

    async def reverse_geocode(self, coordinate: Coordinate) -> ReverseGeocodeResult:
        self.calls += 1
        raise self.error


class MutableClock:
    """Stand-in for date.today that tests can move forward."""

    def __init__(self, today: date):
        self.current = today

    def __call__(self) -> date:
        return self.current


@pytest.fixture
def clock():
    return MutableClock(PARIS_DAY)


@pytest.fixture
def daily(clock):
    return DailyCityService(CITY_CATALOG, today=clock)


@pytest.fixture
def geocoder():
    return FakeGeocoder(country="France")


@pytest.fixture
def engine(geocoder):
    return ScoreEngine(geocoder)


@pytest.fixture
def store():
    return InMemoryPlayedStore()
