"""API Routers"""

from api.routers import health, sync

__all__ = ["health", "sync"]
