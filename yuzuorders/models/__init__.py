"""Data models for Yuzu Orders."""

from yuzuorders.models.common import ExportMode, SyncOperation, SyncState
from yuzuorders.models.orders import (
    ITEM_HEADER,
    SEED_ORDERS,
    CellValue,
    OrderTable,
    Row,
    SheetPayload,
)
from yuzuorders.models.sync import SyncResult, WindowView

__all__ = [
    # Common
    "SyncState",
    "SyncOperation",
    "ExportMode",
    # Orders
    "ITEM_HEADER",
    "SEED_ORDERS",
    "CellValue",
    "OrderTable",
    "Row",
    "SheetPayload",
    # Sync
    "SyncResult",
    "WindowView",
]
