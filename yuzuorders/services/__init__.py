"""
Yuzu Orders Business Logic Services

Date window and order store are pure functions over plain data.
SheetSync and OrderController wrap them with I/O and session state.
"""

from yuzuorders.services.date_window import build_window_keys, build_window_labels
from yuzuorders.services.order_store import (
    collect_all_date_keys,
    get,
    merge_from_rows,
    project_to_rows,
    update,
)
from yuzuorders.services.sheet_sync import SheetSync, export_all, export_window, parse_payload
from yuzuorders.services.controller import OrderController

__all__ = [
    "build_window_keys",
    "build_window_labels",
    "get",
    "update",
    "collect_all_date_keys",
    "project_to_rows",
    "merge_from_rows",
    "export_window",
    "export_all",
    "parse_payload",
    "SheetSync",
    "OrderController",
]
