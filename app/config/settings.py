"""
Runtime settings for the card audio processor.
Values are sourced from environment variables or optional env files.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Function settings with validation and type safety.
    All values configurable via environment variables.
    """

    # Environment
    environment: str = "development"

    # Service identity
    service_name: str = "card-audio-processor"
    service_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_allow_origin: str = "*"

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() in ("production", "prod")


# Global settings instance
settings = Settings()
