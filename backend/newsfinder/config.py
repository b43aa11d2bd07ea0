"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings from env."""

    # Not validated locally; a missing key comes back as a remote auth error
    news_api_key: str = ""
    news_api_url: str = "https://newsapi.org/v2/everything"
    request_timeout: float = 10.0

    max_sessions: int = 1000
    session_cookie: str = "newsfinder_session"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
