import random
from datetime import date, datetime, timedelta
from typing import Callable, List, Sequence, Tuple, Union

from ..models.city import City

# Changing any of these reshuffles every daily assignment
PRIME1 = 31
PRIME2 = 17
OFFSET = 7

DEFAULT_BASE_DATE = date(2024, 1, 1)


class CatalogError(ValueError):
    """The city catalog cannot be used for selection."""


def civil_date(moment: Union[date, datetime]) -> date:
    """Calendar day of a date or a (local) datetime, ignoring time of day."""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def city_index(days_since_base: int, count: int) -> int:
    """Map a day offset to a catalog index in [0, count), for negative offsets too."""
    if count <= 0:
        raise CatalogError("City catalog is empty")
    hash_value = (days_since_base * PRIME1 + OFFSET) * PRIME2
    return abs(hash_value) % count


def city_for_date(
    moment: Union[date, datetime],
    catalog: Sequence[City],
    base_date: date = DEFAULT_BASE_DATE,
) -> City:
    """
    Pick the city for a calendar day.

    Only the civil date of ``moment`` is used, so every time of day on the
    same date gives the same city. Integer arithmetic only.
    """
    if not catalog:
        raise CatalogError("City catalog is empty")
    days_since_base = (civil_date(moment) - base_date).days
    return catalog[city_index(days_since_base, len(catalog))]


class DailyCityService:
    """Daily city accessors over a catalog and a local-date clock."""

    def __init__(
        self,
        catalog: Sequence[City],
        base_date: date = DEFAULT_BASE_DATE,
        today: Callable[[], date] = date.today,
    ):
        if not catalog:
            raise CatalogError("City catalog is empty")
        self.catalog = tuple(catalog)
        self.base_date = base_date
        self._today = today

    def today(self) -> date:
        return civil_date(self._today())

    def city_for(self, moment: Union[date, datetime]) -> City:
        return city_for_date(moment, self.catalog, self.base_date)

    def city_for_today(self) -> City:
        return self.city_for(self.today())

    def tomorrows_city(self) -> City:
        return self.city_for(self.today() + timedelta(days=1))

    def yesterdays_city(self) -> City:
        return self.city_for(self.today() - timedelta(days=1))

    def random_city(self) -> City:
        """Any catalog city. Testing resets only, never the daily assignment."""
        return random.choice(self.catalog)

    def city_sequence(self, days: int) -> List[Tuple[str, str]]:
        """(yyyy-MM-dd, city name) for ``days`` consecutive days starting today."""
        start = self.today()
        sequence = []
        for offset in range(days):
            day = start + timedelta(days=offset)
            sequence.append((day.isoformat(), self.city_for(day).name))
        return sequence
