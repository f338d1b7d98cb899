"""
Yuzu Orders Core Package

Pure business logic for the order list: rolling day window, the nested
order table, and spreadsheet sync.
No framework dependencies (Streamlit, FastAPI) in this package.
"""

__version__ = "1.0.0"

from yuzuorders.models.orders import OrderTable, Row, SheetPayload
from yuzuorders.models.sync import SyncResult
from yuzuorders.services.controller import OrderController

__all__ = [
    "OrderTable",
    "Row",
    "SheetPayload",
    "SyncResult",
    "OrderController",
]
