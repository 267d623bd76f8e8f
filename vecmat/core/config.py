"""
Library configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Decimal arithmetic defaults
    DECIMAL_PRECISION: int = 64  # decimal places kept after each operation
    DECIMAL_ROUNDING: str = "ROUND_HALF_UP"

    model_config = SettingsConfigDict(
        env_prefix="VECMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
