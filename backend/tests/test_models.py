"""Tests for the city, coordinate and score category value types."""

from worldle.data.cities import CITY_CATALOG
from worldle.models.city import City
from worldle.models.geo import Continent, Coordinate
from worldle.models.score import ScoreCategory


class TestCoordinate:
    def test_valid(self):
        assert Coordinate(latitude=48.8566, longitude=2.3522).is_valid
        assert Coordinate(latitude=-90.0, longitude=180.0).is_valid

    def test_out_of_range(self):
        assert not Coordinate(latitude=90.5, longitude=0.0).is_valid
        assert not Coordinate(latitude=0.0, longitude=-180.5).is_valid

    def test_not_finite(self):
        assert not Coordinate(latitude=float("nan"), longitude=0.0).is_valid
        assert not Coordinate(latitude=0.0, longitude=float("inf")).is_valid


class TestCity:
    def test_identity_ignores_continent(self):
        coordinate = Coordinate(latitude=41.0082, longitude=28.9784)
        asia = City(name="Istanbul", country="Turkey", continent=Continent.ASIA, coordinate=coordinate)
        europe = City(name="Istanbul", country="Turkey", continent=Continent.EUROPE, coordinate=coordinate)

        assert asia == europe
        assert hash(asia) == hash(europe)

    def test_different_coordinate_is_different_city(self):
        paris = CITY_CATALOG[0]
        moved = City(
            name=paris.name,
            country=paris.country,
            continent=paris.continent,
            coordinate=Coordinate(latitude=48.0, longitude=2.0),
        )
        assert paris != moved


class TestCatalog:
    def test_not_empty_and_unique(self):
        assert len(CITY_CATALOG) == 24
        assert len(set(CITY_CATALOG)) == len(CITY_CATALOG)

    def test_order_is_stable(self):
        names = [city.name for city in CITY_CATALOG]
        assert names[:3] == ["Paris", "Tokyo", "New York"]
        assert names[-1] == "Ushuaia"

    def test_coordinates_valid(self):
        assert all(city.coordinate.is_valid for city in CITY_CATALOG)


class TestScoreCategory:
    def test_strictness_order(self):
        assert list(ScoreCategory) == [
            ScoreCategory.PERFECT,
            ScoreCategory.EXCELLENT,
            ScoreCategory.SAME_COUNTRY,
            ScoreCategory.SAME_CONTINENT,
            ScoreCategory.MISS,
        ]
        assert ScoreCategory.PERFECT.is_stricter_than(ScoreCategory.MISS)
        assert not ScoreCategory.MISS.is_stricter_than(ScoreCategory.SAME_CONTINENT)

    def test_points(self):
        assert [category.points for category in ScoreCategory] == [5000, 3000, 1500, 500, 100]

    def test_ring_positions_grow_outwards(self):
        positions = [category.ring_position for category in ScoreCategory]
        assert positions == sorted(positions)
        assert all(0.0 <= position <= 1.0 for position in positions)

    def test_display_metadata(self):
        assert ScoreCategory.PERFECT.title == "Perfect!"
        assert ScoreCategory.SAME_COUNTRY.description == "Correct Country"
        assert ScoreCategory.MISS.color == "red"
        assert ScoreCategory.EXCELLENT.emoji == "🔵"
        assert ScoreCategory.SAME_CONTINENT.percentage == "40%"
