"""Application configuration loaded from environment variables."""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Chart geometry (pixels)
    chart_width: float = 280
    chart_height: float = 160
    chart_padding: float = 20

    # Insights
    max_insights: int = 6

    class Config:
        env_prefix = "WELLNESS_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
