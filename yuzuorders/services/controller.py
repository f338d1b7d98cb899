"""
Order Controller

Owns the state of one order-form session: the fixed ``today``, the window
offset, and the current table. The rendering layer holds a reference to
the controller and only changes state through its methods.
"""

import logging
from datetime import date
from typing import List, Optional

from yuzuorders.models.common import SyncOperation, SyncState
from yuzuorders.models.orders import OrderTable, Quantity
from yuzuorders.models.sync import SyncResult, WindowView
from yuzuorders.services import order_store
from yuzuorders.services.date_window import build_window_keys, build_window_labels
from yuzuorders.services.sheet_sync import SheetSync
from yuzuorders.storage.local_store import LocalOrderStorage

logger = logging.getLogger(__name__)


class OrderController:
    """Session state for the order form."""

    def __init__(
        self,
        today: Optional[date] = None,
        storage: Optional[LocalOrderStorage] = None,
        sync: Optional[SheetSync] = None,
        table: Optional[OrderTable] = None,
    ):
        self._today = today or date.today()
        self._offset = 0
        self._table: OrderTable = table if table is not None else order_store.seed_table()
        self.storage = storage
        self.sync = sync
        self.last_sync: Optional[SyncResult] = None

    @property
    def today(self) -> date:
        return self._today

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def table(self) -> OrderTable:
        return self._table

    # Window

    def window_keys(self) -> List[str]:
        return build_window_keys(self._today, self._offset)

    def window_labels(self) -> List[str]:
        return build_window_labels(self._today, self._offset)

    def snapshot(self) -> WindowView:
        """Everything the form needs for one render."""
        return WindowView(
            today=self._today,
            offset=self._offset,
            keys=self.window_keys(),
            labels=self.window_labels(),
            table=self._table,
        )

    def shift(self, direction: int) -> WindowView:
        """Move the window by ``direction`` days."""
        self._offset += direction
        return self.snapshot()

    def reset_offset(self) -> WindowView:
        self._offset = 0
        return self.snapshot()

    # Table

    def _replace_table(self, table: OrderTable):
        self._table = table
        if self.storage is not None:
            self.storage.save(table)

    def get(self, category: str, size: str, date_key: str) -> Quantity:
        return order_store.get(self._table, category, size, date_key)

    def update(
        self,
        category: str,
        size: str,
        date_key: str,
        quantity: Quantity,
    ) -> OrderTable:
        """Set one cell and persist the new table locally."""
        self._replace_table(
            order_store.update(self._table, category, size, date_key, quantity)
        )
        return self._table

    def load_local(self) -> OrderTable:
        """Replace the table with the locally saved one, or the seed data."""
        saved = self.storage.load() if self.storage is not None else None
        self._table = saved if saved is not None else order_store.seed_table()
        return self._table

    # Sync

    def load_remote(self) -> SyncResult:
        """
        Replace the table with the sheet contents.

        On any failure the current table is kept and the result says why.
        """
        if self.sync is None:
            result = SyncResult(
                operation=SyncOperation.IMPORT,
                state=SyncState.FAILED,
                error="No sync endpoint configured",
            )
        else:
            result = self.sync.import_from_remote()
            if result.success and result.table is not None:
                self._replace_table(result.table)

        self.last_sync = result
        return result

    def save(self, include_history: bool = True) -> SyncResult:
        """Send a snapshot of the current table to the sheet."""
        if self.sync is None:
            result = SyncResult(
                operation=SyncOperation.EXPORT,
                state=SyncState.FAILED,
                error="No sync endpoint configured",
            )
        else:
            result = self.sync.export_to_remote(
                self._table,
                self.window_keys(),
                include_history=include_history,
            )

        self.last_sync = result
        return result
