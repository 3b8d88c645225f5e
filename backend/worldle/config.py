from datetime import date
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    ENVIRONMENT: str = "DEV"
    LOG_JSON: bool = False

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./worldle.db"

    # Reverse geocoding (Nominatim-compatible)
    GEOCODER_URL: str = "https://nominatim.openstreetmap.org"
    GEOCODER_USER_AGENT: str = "Worldle/1.0"
    GEOCODER_TIMEOUT_SECONDS: float = 10.0

    # Game Configuration
    PERFECT_DISTANCE_KM: float = 15.0
    EXCELLENT_DISTANCE_KM: float = 100.0
    BASE_DATE: date = date(2024, 1, 1)

    # Player sessions kept in memory
    SESSION_CACHE_SIZE: int = 10000

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
