from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, UniqueConstraint
from .session import Base


class PlayedDay(Base):
    """Whether a player has used up the daily game on a civil date."""
    __tablename__ = "played_days"
    __table_args__ = (UniqueConstraint("player_id", "civil_date", name="uq_played_player_date"),)

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(String(100), index=True, nullable=False)
    civil_date = Column(String(10), nullable=False)  # yyyy-MM-dd
    played = Column(Boolean, default=False, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
