"""Configuration management for Property Reel."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000

    # Validation
    validation_eps_seconds: float = 0.001

    # Edit payload defaults
    timeline_background: str = "#000000"
    output_format: str = "mp4"
    output_resolution: str = "hd"

    # Development
    debug: bool = False
    log_level: str = "INFO"

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )


# Global settings instance
settings = Settings()
