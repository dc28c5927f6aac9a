# Standard library imports
import os
from typing import Final, List, Optional


STORE_MONGO = "mongo"
STORE_MEMORY = "memory"

ADAPTER_LOCAL = "local"
ADAPTER_HTTP = "http"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "userpay")

        # Storage backends ("mongo" or "memory")
        self.user_store: Final[str] = os.getenv("USER_STORE", STORE_MONGO).lower()
        self.payment_store: Final[str] = os.getenv("PAYMENT_STORE", STORE_MEMORY).lower()

        # External user port ("local" wraps the user repository, "http" calls the user service)
        self.user_port_adapter: Final[str] = os.getenv("USER_PORT_ADAPTER", ADAPTER_LOCAL).lower()
        self.user_service_url: Final[str] = os.getenv("USER_SERVICE_URL", "http://localhost:3001")
        self.user_service_timeout_ms: Final[int] = int(os.getenv("USER_SERVICE_TIMEOUT", "5000"))

        # HTTP Configuration
        self.allowed_origins: Final[List[str]] = _split_csv(os.getenv("ALLOWED_ORIGINS", "*"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
