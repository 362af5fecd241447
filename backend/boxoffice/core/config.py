from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Box Office API"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    TIMEZONE: str = "America/Sao_Paulo"

    # Database
    DATABASE_URL: str = "sqlite:///./boxoffice.db"
    # Schema is managed by alembic in deployments; local setups can skip it.
    CREATE_TABLES_ON_STARTUP: bool = True

    LOG_DIR: str = "logs"

    # Seconds a purchase waits for its showtime's lock before giving up.
    RESERVATION_LOCK_TIMEOUT_SECONDS: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
