# imagegen/core/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # required, no defaults
    SECRET_KEY: str
    DATABASE_URL: str

    # JWT
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 1 week

    DB_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # simulated generation provider
    IMAGE_BASE_URL: str = "https://generated-images.example.com"
    GENERATION_FAILURE_TRIGGER: str = "error"

    # public links handed out by the share endpoint
    SHARE_BASE_URL: str = "https://app.example.com"

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # load from project-root .env and ignore everything else in it
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# singleton instance
settings = Settings()
