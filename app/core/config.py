"""
Application configuration using pydantic-settings
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS
    FRONTEND_URL: str = "http://localhost:5173"

    # Simulated generation latency (seconds), applied at the API boundary
    SCRIPT_LATENCY_SECONDS: float = Field(default=3.0, ge=0)
    THUMBNAIL_LATENCY_SECONDS: float = Field(default=2.0, ge=0)

    # Year used in SEO keywords and year-bearing title phrasings
    SEO_KEYWORD_YEAR: int = 2024

    # Placeholder images returned with thumbnail variations
    THUMBNAIL_PLACEHOLDER_BASE_URL: str = "https://images.pexels.com/photos"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Create settings instance
settings = Settings()
