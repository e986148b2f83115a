"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Course Progress API"
    debug: bool = False
    log_level: str = "INFO"

    # Server (python -m app)
    host: str = "127.0.0.1"
    port: int = 3001

    # Routes are mounted under this prefix; the course client calls <host>/api/...
    api_prefix: str = "/api"
    cors_allow_origins: str = "*"

    # Database
    database_url: str = "sqlite:///./course_progress.db"
    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: int = 30  # seconds a request waits for a free connection

    # Passwords
    bcrypt_rounds: int = 10
    password_min_length: int = 6

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


def cors_origins(settings: Settings) -> list[str]:
    """Split the comma-separated CORS origins setting."""
    return [o.strip() for o in (settings.cors_allow_origins or "").split(",") if o.strip()]
