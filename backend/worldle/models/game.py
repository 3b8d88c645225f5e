from pydantic import BaseModel
from typing import Optional, List
from datetime import date

from .city import City
from .score import ScoreCategory


class GuessRequest(BaseModel):
    """Request for placing the pin.

    Ranges are not checked here: an out-of-range guess is scored as a miss.
    """
    latitude: float
    longitude: float


class CityResponse(BaseModel):
    """A city including its location."""
    name: str
    country: str
    continent: str
    latitude: float
    longitude: float

    @classmethod
    def from_city(cls, city: City) -> "CityResponse":
        return cls(
            name=city.name,
            country=city.country,
            continent=city.continent.value,
            latitude=city.coordinate.latitude,
            longitude=city.coordinate.longitude,
        )


class TargetResponse(BaseModel):
    """The city to find (location withheld)."""
    name: str
    country: str
    continent: str


class CitySequenceEntry(BaseModel):
    date: str
    city: str


class ScoreCategoryResponse(BaseModel):
    """Display metadata for a score category."""
    key: str
    title: str
    description: str
    color: str
    ring_position: float
    emoji: str
    percentage: str
    points: int

    @classmethod
    def from_category(cls, category: ScoreCategory) -> "ScoreCategoryResponse":
        return cls(
            key=category.value,
            title=category.title,
            description=category.description,
            color=category.color,
            ring_position=category.ring_position,
            emoji=category.emoji,
            percentage=category.percentage,
            points=category.points,
        )


class GameStateResponse(BaseModel):
    """Response with the player's session for the day."""
    phase: str
    day: date
    target: TargetResponse
    is_pin_placed: bool
    show_result: bool
    has_played_today: bool
    is_testing_mode: bool
    guess_latitude: Optional[float] = None
    guess_longitude: Optional[float] = None
    # Only filled in once the guess is scored
    actual_latitude: Optional[float] = None
    actual_longitude: Optional[float] = None
    distance_km: Optional[float] = None
    score: int = 0
    category: Optional[ScoreCategoryResponse] = None


class CategoriesResponse(BaseModel):
    categories: List[ScoreCategoryResponse]
