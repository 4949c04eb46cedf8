# pictosigns/core/settings.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "pictosigns"

    # --- Database ---
    DATABASE_URL: str = "sqlite:///./pictosigns.db"

    # --- Auth ---
    # Injected at startup, never hardcoded (see main._startup_guard)
    JWT_SECRET: Optional[str] = None
    JWT_EXP_HOURS: int = 24

    # --- HTTP ---
    ALLOWED_ORIGINS: list[str] = [
        "https://admin.pictosigns.io",
        "https://pictosigns.com",
    ]

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Pricing ---
    # Count pos_bc twice and skip pos_br, like the deployed price lists expect
    LEGACY_POSITION_COUNT: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()  # reads .env
