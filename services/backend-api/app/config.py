"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings - read from environment variables or .env."""

    # Application
    app_name: str = "backend-api"
    app_version: str = "1.0.0"
    debug: bool = False

    # MongoDB - base URL is REQUIRED from environment, database name is fixed
    mongodb_url: str
    mongodb_connect_timeout_ms: int = 10000

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:8080"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
