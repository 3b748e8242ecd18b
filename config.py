"""
Config Comparator - Settings
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    APP_NAME: str = "Config Comparator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"  # Used when DEBUG is off

    # Comparison
    FLATTEN_SEPARATOR: str = "."
    SUPPORTED_EXTENSIONS: list[str] = [
        ".json", ".yaml", ".yml", ".toml", ".ini", ".xml", ".properties"
    ]

    # File Watching
    WATCH_DEBOUNCE_SECONDS: float = 0.5  # Wait for writers to finish before re-comparing

    # CORS - comma-separated list of allowed origins, or "*" for all
    CORS_ORIGINS: str = "*"

    # Allowed hosts for Host header validation (comma-separated, or "*" to disable)
    ALLOWED_HOSTS: str = "*"

    # Maximum request body size in bytes (10MB default)
    MAX_REQUEST_SIZE: int = 10 * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
