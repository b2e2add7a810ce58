from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # ---------- server ----------
    BACKEND_CORS_ORIGINS: List[str] = []
    LOG_LEVEL: str = "INFO"

    # ---------- database ----------
    DATABASE_URL: str = "sqlite:///./cleaning.db"

    # ---------- auth ----------
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # ---------- scheduling ----------
    # Longest date range accepted by list endpoints (overrides, assignments)
    MAX_RANGE_DAYS: int = 62
    DEFAULT_TIMEZONE: str = "Europe/Bucharest"


settings = Settings()
