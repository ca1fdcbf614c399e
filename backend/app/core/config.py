# backend/app/core/config.py
import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Druika Caves - Backend"
    API_V1_STR: str = "/api/v1"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()  # Default to INFO

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Save files written by a different version are rejected on load.
    SAVE_GAME_VERSION: str = "1.0"

    # Background ticker that advances lingering hazards for connected players.
    WORLD_TICK_INTERVAL_SECONDS: float = 10.0
    LINGER_TICKS_ENABLED: bool = os.getenv("LINGER_TICKS_ENABLED", "True").lower() == "true"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
