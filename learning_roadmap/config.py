from pydantic_settings import BaseSettings
from typing import Optional, Union
from functools import lru_cache
from pathlib import Path
from pydantic import AliasChoices, Field, field_validator

# Get the project root directory (one level up from learning_roadmap/)
PROJECT_ROOT = Path(__file__).parent.parent

# Export these for app-wide use
__all__ = ["Settings", "settings", "get_settings", "PROJECT_ROOT"]

class Settings(BaseSettings):
    # App Settings
    app_name: str = "AI·DX Learning Roadmap"
    debug: Union[bool, str] = False

    @field_validator('debug', mode='before')
    @classmethod
    def parse_debug(cls, v):
        """Parse debug from various formats"""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.lower().strip()
            if v_lower in ('true', '1', 'yes', 'on'):
                return True
            if v_lower in ('false', '0', 'no', 'off', ''):
                return False
            # Anything else (like 'WARN') is treated as a development flag
            return True
        return bool(v)

    # Server Settings
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS Settings - Allowed frontend URLs
    cors_origins: Union[str, list[str]] = ["*"]

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list"""
        if isinstance(v, str):
            # Handle comma-separated string from .env
            if v.strip() == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    # Environment (development or production)
    environment: str = "development"

    # Gemini (Google Generative Language API)
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )  # Maps to GEMINI_API_KEY or API_KEY
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout: float = 180.0  # Timeout in seconds
    gemini_temperature: Optional[float] = None  # None -> model default

    # Logging
    log_level: str = "INFO"

    class Config:
        # Look for .env in project root
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env that aren't defined
        populate_by_name = True

@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache a single Settings instance (Singleton pattern).
    Returns the same instance on subsequent calls.
    """
    return Settings()

# Create a global settings instance for convenience
settings = get_settings()
