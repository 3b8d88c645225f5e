import asyncio
from datetime import date
from enum import Enum
from collections import OrderedDict
from typing import Callable, Optional

from pydantic import BaseModel

from ..models.city import City
from ..models.geo import Coordinate
from ..models.score import ScoreCategory
from ..utils.logger import format_coordinate, format_distance, get_logger
from .daily import DailyCityService
from .scoring import ScoreEngine
from .store import PlayedStore, civil_date_key

logger = get_logger(__name__)


class GamePhase(str, Enum):
    IDLE = "idle"
    PIN_PLACED = "pinPlaced"
    RESULTED = "resulted"


class GameState(BaseModel):
    """Snapshot of a session for renderers."""
    phase: GamePhase
    current_city: City
    day: date
    selected_coordinate: Optional[Coordinate] = None
    is_pin_placed: bool = False
    show_result: bool = False
    distance_km: float = 0.0
    score: int = 0
    score_category: ScoreCategory = ScoreCategory.MISS
    has_played_today: bool = False
    is_testing_mode: bool = False


class GameSession:
    """
    One player's game for the current civil day.

    Idle -> PinPlaced -> Resulted. Transitions that are not allowed from the
    current phase do nothing. Mutations are serialized on an asyncio lock, so
    a second submit waits for the first and then finds nothing to do.
    """

    def __init__(
        self,
        daily: DailyCityService,
        engine: ScoreEngine,
        store: PlayedStore,
        testing_mode: bool = False,
    ):
        self.daily = daily
        self.engine = engine
        self.store = store
        self.is_testing_mode = testing_mode
        self.day = daily.today()
        self.current_city = daily.city_for(self.day)
        self._persisted_played = False
        self._lock = asyncio.Lock()
        self._clear_round()

    @classmethod
    async def start(
        cls,
        daily: DailyCityService,
        engine: ScoreEngine,
        store: PlayedStore,
        testing_mode: bool = False,
    ) -> "GameSession":
        """Create a session on today's city and load today's played flag."""
        session = cls(daily, engine, store, testing_mode)
        await session.refresh_played_status()
        return session

    def _clear_round(self):
        self.phase = GamePhase.IDLE
        self.selected_coordinate: Optional[Coordinate] = None
        self.distance_km = 0.0
        self.score_category = ScoreCategory.MISS

    @property
    def civil_date(self) -> str:
        return civil_date_key(self.day)

    @property
    def is_pin_placed(self) -> bool:
        return self.selected_coordinate is not None

    @property
    def show_result(self) -> bool:
        return self.phase is GamePhase.RESULTED

    @property
    def score(self) -> int:
        return self.score_category.points if self.show_result else 0

    @property
    def has_played_today(self) -> bool:
        # Testing mode lifts the daily limit without touching the stored flag
        if self.is_testing_mode:
            return False
        return self._persisted_played

    async def refresh_played_status(self):
        self._persisted_played = await self.store.has_played(self.civil_date)

    def place_guess(self, coordinate: Coordinate) -> bool:
        """Drop or move the pin. Returns False once a result exists or while scoring."""
        if self.phase is GamePhase.RESULTED or self._lock.locked():
            return False
        self.selected_coordinate = coordinate
        self.phase = GamePhase.PIN_PLACED
        return True

    async def submit(self) -> bool:
        """
        Score the placed pin.

        Does nothing unless a pin is placed and today's game is still
        available. If cancelled, or if storing the played flag fails, the
        session stays in PinPlaced.
        """
        async with self._lock:
            if self.phase is not GamePhase.PIN_PLACED or self.has_played_today:
                return False

            guess = self.selected_coordinate
            target = self.current_city
            result = await self.engine.evaluate(guess, target)

            # Nothing changes until the played flag is stored, so a cancelled
            # or failed write leaves the pin placed and the day playable
            if not self.is_testing_mode:
                await self.store.set_played(True, self.civil_date)
                self._persisted_played = True

            self.distance_km = result.distance_km
            self.score_category = result.category
            self.phase = GamePhase.RESULTED

            logger.info(
                "guess_scored",
                target=f"{target.name} at {format_coordinate(target.coordinate.latitude, target.coordinate.longitude)}",
                guess=format_coordinate(guess.latitude, guess.longitude),
                distance=format_distance(result.distance_km),
                category=result.category.title,
                score=result.score,
            )

            return True

    async def reset_for_new_day(self):
        """Move to the current civil day's city and reload its played flag."""
        async with self._lock:
            self.day = self.daily.today()
            self.current_city = self.daily.city_for(self.day)
            self._clear_round()
            await self.refresh_played_status()
            logger.info(
                "new_day",
                day=self.civil_date,
                city=f"{self.current_city.name}, {self.current_city.country}",
            )

    async def toggle_testing_mode(self):
        async with self._lock:
            self.is_testing_mode = not self.is_testing_mode
            await self.refresh_played_status()
            logger.info(
                "testing_mode_toggled",
                testing_mode=self.is_testing_mode,
                daily_restrictions="disabled" if self.is_testing_mode else "enabled",
            )

    async def reset_for_testing(self) -> bool:
        """Start over on a random city. Only allowed in testing mode."""
        async with self._lock:
            if not self.is_testing_mode:
                return False
            self.current_city = self.daily.random_city()
            self._clear_round()
            logger.info(
                "game_reset",
                city=f"{self.current_city.name}, {self.current_city.country}",
            )
            return True

    def snapshot(self) -> GameState:
        return GameState(
            phase=self.phase,
            current_city=self.current_city,
            day=self.day,
            selected_coordinate=self.selected_coordinate,
            is_pin_placed=self.is_pin_placed,
            show_result=self.show_result,
            distance_km=self.distance_km,
            score=self.score,
            score_category=self.score_category,
            has_played_today=self.has_played_today,
            is_testing_mode=self.is_testing_mode,
        )


class SessionRegistry:
    """
    Per-player sessions for the HTTP surface.

    Sessions from an earlier civil day are dropped on the next lookup, and
    the least recently used ones are evicted past ``max_sessions``. A dropped
    player gets a fresh session that reloads its played flag from the store.
    """

    def __init__(
        self,
        daily: DailyCityService,
        engine: ScoreEngine,
        store_factory: Callable[[str], PlayedStore],
        max_sessions: int = 10000,
    ):
        self.daily = daily
        self.engine = engine
        self.store_factory = store_factory
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self._sessions

    async def get(self, player_id: str) -> GameSession:
        async with self._lock:
            self._drop_stale(self.daily.today())

            session = self._sessions.get(player_id)
            if session is not None:
                self._sessions.move_to_end(player_id)
                return session

            session = await GameSession.start(self.daily, self.engine, self.store_factory(player_id))
            self._sessions[player_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("session_evicted", player_id=evicted)
            return session

    def _drop_stale(self, today: date):
        stale = [player_id for player_id, session in self._sessions.items() if session.day != today]
        for player_id in stale:
            del self._sessions[player_id]
        if stale:
            logger.info("stale_sessions_dropped", count=len(stale), day=civil_date_key(today))
