"""
API Configuration

All endpoints loaded from environment variables.
The Apps Script web app URL is deployment-specific; set SHEETS_WEBAPP_URL.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "Yuzu Orders Sync Proxy"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Upstream Google Apps Script web app
    sheets_webapp_url: Optional[str] = None  # Loaded from SHEETS_WEBAPP_URL env var
    upstream_timeout: int = 30

    # CORS (comma-separated, "*" allows any origin)
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def upstream_configured(self) -> bool:
        return bool(self.sheets_webapp_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
