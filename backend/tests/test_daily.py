"""Tests for deterministic daily city selection."""

from datetime import date, datetime, timedelta

import pytest

from worldle.data.cities import CITY_CATALOG
from worldle.services.daily import (
    CatalogError,
    DailyCityService,
    city_for_date,
    city_index,
)

from tests.conftest import MutableClock

BASE = date(2024, 1, 1)


class TestCityIndex:
    def test_known_values(self):
        # (0 * 31 + 7) * 17 = 119, 119 % 24 = 23
        assert city_index(0, 24) == 23
        # (1 * 31 + 7) * 17 = 646, 646 % 24 = 22
        assert city_index(1, 24) == 22
        # (-1 * 31 + 7) * 17 = -408, 408 % 24 = 0
        assert city_index(-1, 24) == 0

    @pytest.mark.parametrize("count", [1, 2, 7, 24, 31])
    def test_index_in_range_for_negative_and_positive_days(self, count):
        for days in range(-1000, 1001):
            assert 0 <= city_index(days, count) < count

    def test_empty_catalog(self):
        with pytest.raises(CatalogError):
            city_index(0, 0)


class TestCityForDate:
    def test_base_date(self):
        assert city_for_date(BASE, CITY_CATALOG).name == "Ushuaia"

    def test_day_before_base_date(self):
        assert city_for_date(date(2023, 12, 31), CITY_CATALOG).name == "Paris"

    def test_same_civil_day_any_time(self):
        morning = datetime(2025, 3, 14, 0, 0, 1)
        night = datetime(2025, 3, 14, 23, 59, 59)
        assert city_for_date(morning, CITY_CATALOG) == city_for_date(night, CITY_CATALOG)
        assert city_for_date(morning, CITY_CATALOG) == city_for_date(date(2025, 3, 14), CITY_CATALOG)

    def test_custom_base_date(self):
        assert city_for_date(date(2030, 6, 1), CITY_CATALOG, base_date=date(2030, 6, 1)).name == "Ushuaia"

    def test_far_past_dates_stay_in_catalog(self):
        assert city_for_date(date(1900, 1, 1), CITY_CATALOG) in CITY_CATALOG

    def test_empty_catalog(self):
        with pytest.raises(CatalogError):
            city_for_date(BASE, [])


class TestDailyCityService:
    def test_empty_catalog_refused(self):
        with pytest.raises(CatalogError):
            DailyCityService([])

    def test_today_tomorrow_yesterday(self):
        service = DailyCityService(CITY_CATALOG, today=MutableClock(BASE))

        assert service.city_for_today().name == "Ushuaia"
        assert service.tomorrows_city().name == "Anchorage"
        assert service.yesterdays_city().name == "Paris"

    def test_today_follows_clock(self):
        clock = MutableClock(BASE)
        service = DailyCityService(CITY_CATALOG, today=clock)
        clock.current = BASE + timedelta(days=1)
        assert service.city_for_today().name == "Anchorage"

    def test_clock_returning_datetime(self):
        service = DailyCityService(CITY_CATALOG, today=lambda: datetime(2024, 1, 1, 18, 30))
        assert service.today() == BASE
        assert service.city_for_today().name == "Ushuaia"

    def test_city_sequence(self):
        service = DailyCityService(CITY_CATALOG, today=MutableClock(BASE))
        assert service.city_sequence(3) == [
            ("2024-01-01", "Ushuaia"),
            ("2024-01-02", "Anchorage"),
            ("2024-01-03", "Perth"),
        ]

    def test_city_sequence_empty(self):
        service = DailyCityService(CITY_CATALOG, today=MutableClock(BASE))
        assert service.city_sequence(0) == []

    def test_random_city_comes_from_catalog(self):
        service = DailyCityService(CITY_CATALOG)
        for _ in range(20):
            assert service.random_city() in CITY_CATALOG
