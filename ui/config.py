"""UI Configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from yuzuorders.models.common import ExportMode
from yuzuorders.storage.local_store import DEFAULT_STORAGE_PATH


class UISettings(BaseSettings):
    """UI settings loaded from environment variables."""

    # Sync proxy endpoint (api.main, or any relay with the same contract)
    sync_url: str = "http://localhost:8000/sync"

    # Local persistence slot
    storage_path: str = DEFAULT_STORAGE_PATH

    # Save everything we know about, or only the visible window
    export_mode: ExportMode = ExportMode.ALL

    # UI settings
    page_title: str = "Order List"
    page_icon: str = ""
    debug: bool = False

    # Timeouts (seconds)
    request_timeout: int = 30

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "UI_"
        extra = "ignore"


@lru_cache()
def get_settings() -> UISettings:
    """Get cached settings instance."""
    return UISettings()
