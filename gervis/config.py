"""
Shared configuration module for the Gervis portfolio metrics service.
All modules read settings from here.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "Gervis"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    
    # Display
    NOT_AVAILABLE_LABEL: str = Field("N/A", min_length=1, description="Shown when a metric is not computable")
    
    # Sentry
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5000"]
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level
    
    class Config:
        env_file = ".env"
        case_sensitive = True
    
    def validate_production_settings(self) -> None:
        """Validate settings for production environment."""
        if self.ENVIRONMENT == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if "*" in self.CORS_ORIGINS:
                raise ValueError("CORS_ORIGINS must not allow every origin in production")


# Global settings instance
settings = Settings()

# Validate settings on import (only in production)
if settings.ENVIRONMENT == "production":
    try:
        settings.validate_production_settings()
    except ValueError as e:
        import sys
        import logging
        logger = logging.getLogger(__name__)
        logger.critical(f"Production configuration error: {e}", exc_info=True)
        print(f"CRITICAL: Production configuration error: {e}", file=sys.stderr)
        sys.exit(1)
