from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    # Debug record for every activity type code this build does not know.
    LOG_UNKNOWN_CODES: bool = True

    ACTIVITY_MAX_BUTTONS: int = 2

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
