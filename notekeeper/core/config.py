# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the note store.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Moscow")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "notekeeper")
        self.mongo_timeout_ms: Final[int] = int(
            os.getenv("MONGO_TIMEOUT_MS", "5000")
        )
        
        # Collection Names
        self.notes_collection: Final[str] = os.getenv("NOTES_COLLECTION", "notes")
        
        # Listing
        self.notes_page_size: Final[int] = int(
            os.getenv("NOTES_PAGE_SIZE", "20")
        )


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


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
