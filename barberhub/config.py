"""BarberHub Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "BarberHub"
    APP_VERSION: str = "1.0.0"

    # Timezone used to decide what "today" means for the dashboard
    TIMEZONE: str = "America/Sao_Paulo"

    # Demo data loaded into the in-memory store at startup
    SEED_DEMO_DATA: bool = True

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
