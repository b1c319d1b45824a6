from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    redis_url: str = "redis://localhost:6379/0"
    database_url: str = "sqlite:///./calchub.db"

    # Favorites/history persistence: "redis", "sql" or "memory"
    state_backend: str = "redis"
    storage_prefix: str = "calchub"

    # Client resolution (X-Client-Id header -> this fallback)
    default_client_id: str = "local"

    # Engine defaults
    favorites_max: int = 8
    history_max: int = 10
    default_precision: int = 6

    # Time registry: civil-average calendar (month = year / 12)
    days_per_year: float = 365.2425

    # Rate limiting (per-IP)
    rate_limit: str = "100/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
