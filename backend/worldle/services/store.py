from datetime import date
from typing import Dict, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..database.models import PlayedDay


def civil_date_key(day: date) -> str:
    """Storage key for a civil date, formatted yyyy-MM-dd."""
    return day.strftime("%Y-%m-%d")


class PlayedStore(Protocol):
    async def has_played(self, civil_date: str) -> bool:
        ...

    async def set_played(self, played: bool, civil_date: str) -> None:
        ...


class InMemoryPlayedStore:
    """Played flags kept in a dict, for tests and single-process use."""

    def __init__(self):
        self.flags: Dict[str, bool] = {}

    async def has_played(self, civil_date: str) -> bool:
        return self.flags.get(civil_date, False)

    async def set_played(self, played: bool, civil_date: str) -> None:
        self.flags[civil_date] = played


class SqlPlayedStore:
    """Played flags for one player in the played_days table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], player_id: str):
        self.session_factory = session_factory
        self.player_id = player_id

    async def has_played(self, civil_date: str) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(
                select(PlayedDay.played).where(
                    PlayedDay.player_id == self.player_id,
                    PlayedDay.civil_date == civil_date
                )
            )
            played = result.scalar_one_or_none()
        return bool(played)

    async def set_played(self, played: bool, civil_date: str) -> None:
        async with self.session_factory() as db:
            result = await db.execute(
                select(PlayedDay).where(
                    PlayedDay.player_id == self.player_id,
                    PlayedDay.civil_date == civil_date
                )
            )
            row = result.scalar_one_or_none()
            if row is None:
                db.add(PlayedDay(player_id=self.player_id, civil_date=civil_date, played=played))
            else:
                row.played = played
            await db.commit()
