import math
from typing import List

from fastapi import APIRouter, Depends, Header, Query

from ..config import get_settings
from ..data.cities import CITY_CATALOG
from ..database.session import async_session
from ..models.game import (
    CategoriesResponse, CityResponse, CitySequenceEntry, GameStateResponse,
    GuessRequest, ScoreCategoryResponse, TargetResponse
)
from ..models.geo import Coordinate
from ..models.score import ScoreCategory
from ..services.daily import DailyCityService
from ..services.game import GameSession, SessionRegistry
from ..services.geocoding import NominatimGeocoder
from ..services.scoring import ScoreEngine
from ..services.store import SqlPlayedStore

router = APIRouter(prefix="/game", tags=["Game"])
settings = get_settings()

daily_service = DailyCityService(CITY_CATALOG, base_date=settings.BASE_DATE)
score_engine = ScoreEngine(
    NominatimGeocoder(
        settings.GEOCODER_URL,
        settings.GEOCODER_USER_AGENT,
        timeout=settings.GEOCODER_TIMEOUT_SECONDS
    ),
    perfect_distance_km=settings.PERFECT_DISTANCE_KM,
    excellent_distance_km=settings.EXCELLENT_DISTANCE_KM
)
session_registry = SessionRegistry(
    daily_service,
    score_engine,
    lambda player_id: SqlPlayedStore(async_session, player_id),
    max_sessions=settings.SESSION_CACHE_SIZE
)


def get_daily_service() -> DailyCityService:
    return daily_service


def get_registry() -> SessionRegistry:
    return session_registry


async def get_session(
    player_id: str = Header(default="local", alias="X-Player-Id", min_length=1, max_length=100),
    registry: SessionRegistry = Depends(get_registry)
) -> GameSession:
    """Resolve the caller's session, rolling it over if the day changed."""
    return await registry.get(player_id)


def _state_response(session: GameSession) -> GameStateResponse:
    state = session.snapshot()
    city = state.current_city
    response = GameStateResponse(
        phase=state.phase.value,
        day=state.day,
        target=TargetResponse(name=city.name, country=city.country, continent=city.continent.value),
        is_pin_placed=state.is_pin_placed,
        show_result=state.show_result,
        has_played_today=state.has_played_today,
        is_testing_mode=state.is_testing_mode,
    )
    if state.selected_coordinate is not None:
        response.guess_latitude = state.selected_coordinate.latitude
        response.guess_longitude = state.selected_coordinate.longitude
    if state.show_result:
        response.actual_latitude = city.coordinate.latitude
        response.actual_longitude = city.coordinate.longitude
        # Malformed guesses can produce a NaN distance, which JSON cannot carry
        response.distance_km = state.distance_km if math.isfinite(state.distance_km) else None
        response.score = state.score
        response.category = ScoreCategoryResponse.from_category(state.score_category)
    return response


@router.get("/cities/today", response_model=CityResponse)
async def get_todays_city(daily: DailyCityService = Depends(get_daily_service)):
    """Get today's city."""
    return CityResponse.from_city(daily.city_for_today())


@router.get("/cities/tomorrow", response_model=CityResponse)
async def get_tomorrows_city(daily: DailyCityService = Depends(get_daily_service)):
    """Preview tomorrow's city."""
    return CityResponse.from_city(daily.tomorrows_city())


@router.get("/cities/yesterday", response_model=CityResponse)
async def get_yesterdays_city(daily: DailyCityService = Depends(get_daily_service)):
    """Get yesterday's city."""
    return CityResponse.from_city(daily.yesterdays_city())


@router.get("/cities/sequence", response_model=List[CitySequenceEntry])
async def get_city_sequence(
    days: int = Query(default=7, ge=1, le=60),
    daily: DailyCityService = Depends(get_daily_service)
):
    """List the cities for the coming days, starting today."""
    return [CitySequenceEntry(date=day, city=name) for day, name in daily.city_sequence(days)]


@router.get("/categories", response_model=CategoriesResponse)
async def get_categories():
    """Get display metadata for every score category, strictest first."""
    return CategoriesResponse(
        categories=[ScoreCategoryResponse.from_category(category) for category in ScoreCategory]
    )


@router.get("/state", response_model=GameStateResponse)
async def get_state(session: GameSession = Depends(get_session)):
    """Get the player's game for today."""
    return _state_response(session)


@router.post("/guess", response_model=GameStateResponse)
async def place_guess(guess: GuessRequest, session: GameSession = Depends(get_session)):
    """Place or move the pin."""
    session.place_guess(Coordinate(latitude=guess.latitude, longitude=guess.longitude))
    return _state_response(session)


@router.post("/submit", response_model=GameStateResponse)
async def submit_guess(session: GameSession = Depends(get_session)):
    """Score the placed pin. Has no effect if there is nothing to score."""
    await session.submit()
    return _state_response(session)


@router.post("/testing-mode", response_model=GameStateResponse)
async def toggle_testing_mode(session: GameSession = Depends(get_session)):
    """Switch testing mode (no daily limit) on or off."""
    await session.toggle_testing_mode()
    return _state_response(session)


@router.post("/reset", response_model=GameStateResponse)
async def reset_game(session: GameSession = Depends(get_session)):
    """Start over on a random city. Only works in testing mode."""
    await session.reset_for_testing()
    return _state_response(session)


@router.post("/new-day", response_model=GameStateResponse)
async def new_day(session: GameSession = Depends(get_session)):
    """Reload today's city and played status."""
    await session.reset_for_new_day()
    return _state_response(session)
