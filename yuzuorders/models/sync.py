"""Sync result and view models."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from yuzuorders.models.common import SyncOperation, SyncState
from yuzuorders.models.orders import OrderTable


@dataclass
class SyncResult:
    """Outcome of one request-response cycle against the sync endpoint."""
    operation: SyncOperation
    state: SyncState
    table: Optional[OrderTable] = None
    error: Optional[str] = None
    status_code: int = 0
    rows_count: int = 0

    @property
    def success(self) -> bool:
        return self.state == SyncState.SUCCESS


@dataclass(frozen=True)
class WindowView:
    """Immutable snapshot of what the form should render."""
    today: date
    offset: int
    keys: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    table: OrderTable = field(default_factory=dict)

    @property
    def center_key(self) -> str:
        return self.keys[len(self.keys) // 2]

    @property
    def is_today_centered(self) -> bool:
        return self.offset == 0
