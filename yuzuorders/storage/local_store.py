"""
Local Order Storage

A single JSON key-value slot holding the serialized order table. Loaded
once at startup and overwritten after every edit.

Failures are logged and never raised: the in-memory table stays
authoritative for the session.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from yuzuorders.exceptions import SerializationFailure
from yuzuorders.models.orders import OrderTable

logger = logging.getLogger(__name__)

_table_adapter = TypeAdapter(OrderTable)

STORAGE_KEY = "yuzu-order-list-orders-v1"
DEFAULT_STORAGE_PATH = f"./data/{STORAGE_KEY}.json"


class LocalOrderStorage:
    """
    File-backed storage slot for the order table.

    Writes go to a sibling temp file that is then renamed over the slot.
    """

    def __init__(self, path: str = DEFAULT_STORAGE_PATH):
        self.path = Path(path)

    def _read(self) -> Optional[OrderTable]:
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SerializationFailure(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise SerializationFailure(
                f"Expected an object in {self.path}, got {type(data).__name__}"
            )
        try:
            return _table_adapter.validate_python(data)
        except ValidationError as e:
            raise SerializationFailure(
                f"Saved orders in {self.path} do not match category -> size -> date -> quantity",
                details={"errors": e.errors()}
            ) from e

    def _write(self, table: OrderTable):
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(table, f, ensure_ascii=False)
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            raise SerializationFailure(f"Cannot write {self.path}: {e}") from e

    def load(self) -> Optional[OrderTable]:
        """Return the saved table, or None if missing or unreadable."""
        try:
            table = self._read()
        except SerializationFailure as e:
            logger.error(f"Failed to load saved orders: {e.message}")
            return None

        if table is not None:
            logger.debug(f"Loaded saved orders from {self.path}")
        return table

    def save(self, table: OrderTable) -> bool:
        """Persist the table. Returns False if the write failed."""
        try:
            self._write(table)
        except SerializationFailure as e:
            logger.error(f"Failed to persist orders: {e.message}")
            return False
        return True

    def clear(self):
        """Remove the saved table."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove {self.path}: {e}")
