from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    # Admin routes require: Authorization: Bearer <API_SECRET_KEY>
    API_SECRET_KEY: str = ""
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    LOW_STOCK_THRESHOLD: int = 5
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
