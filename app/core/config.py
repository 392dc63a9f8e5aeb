"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (DB URI, session secret, upstream URL, etc.)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="tradegate",
        description="MongoDB database name"
    )

    # Session tokens
    JWT_SECRET: str = Field(
        default="change-me-in-production",
        description="Secret used to sign and verify session tokens"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Session token signing algorithm"
    )
    SESSION_COOKIE_NAME: str = Field(
        default="session_token",
        description="Cookie carrying the session token"
    )
    SESSION_TTL_HOURS: int = Field(
        default=24,
        description="Lifetime of newly minted session tokens in hours"
    )

    # Trading key registration upstream
    REGISTER_KEY_UPSTREAM_URL: str = Field(
        default="https://binance.yashvardhandhondge.tech/api/register-key",
        description="Upstream endpoint that registers exchange API keys"
    )
    REGISTER_KEY_UPSTREAM_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Upstream request timeout in seconds (unset = wait indefinitely)"
    )

    # Realtime
    SOCKETIO_PATH: str = Field(
        default="/api/socketio",
        description="Path where the Socket.io server is reachable"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v, info: ValidationInfo):
        """Ensure the session secret is changed in production."""
        if info.data.get("ENVIRONMENT") == "production" and v == "change-me-in-production":
            raise ValueError("JWT_SECRET must be changed in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.MONGODB_URL:
        errors.append("MONGODB_URL is required")

    if not settings.REGISTER_KEY_UPSTREAM_URL:
        errors.append("REGISTER_KEY_UPSTREAM_URL is required")
    elif not settings.is_development and not settings.REGISTER_KEY_UPSTREAM_URL.startswith("https://"):
        errors.append("REGISTER_KEY_UPSTREAM_URL must use https outside development")

    if settings.REGISTER_KEY_UPSTREAM_TIMEOUT is not None and settings.REGISTER_KEY_UPSTREAM_TIMEOUT <= 0:
        errors.append("REGISTER_KEY_UPSTREAM_TIMEOUT must be positive when set")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
