"""Error taxonomy for sync and local persistence."""

from typing import Any, Dict, Optional


class OrderSyncError(Exception):
    """Base class for order list errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class TransportFailure(OrderSyncError):
    """Network unreachable, timeout, or a non-2xx response."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        super().__init__(message, details)


class MalformedPayload(OrderSyncError):
    """Remote payload does not have the expected header/rows shape."""


class SerializationFailure(OrderSyncError):
    """Local persistence could not be read or written."""
