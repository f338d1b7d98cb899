"""
Order Store

Pure operations on the nested order table. Tables are never mutated in
place: every write returns a new table, so a snapshot taken for a save
stays consistent while the user keeps editing.
"""

import copy
import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from yuzuorders.models.orders import SEED_ORDERS, CellValue, OrderTable, Quantity, Row

logger = logging.getLogger(__name__)


def seed_table() -> OrderTable:
    """Fresh copy of the starting categories and sizes."""
    return copy.deepcopy(SEED_ORDERS)


def get(table: OrderTable, category: str, size: str, date_key: str) -> Quantity:
    """Return the stored quantity, or 0 if missing at any level."""
    return table.get(category, {}).get(size, {}).get(date_key, 0)


def update(
    table: OrderTable,
    category: str,
    size: str,
    date_key: str,
    quantity: Quantity,
) -> OrderTable:
    """
    Return a new table with one cell replaced.

    Untouched categories and sizes are shared with the input table. No
    validation happens here; the form clamps to numbers but keeps the sign.
    """
    prev_category = table.get(category, {})
    prev_size = prev_category.get(size, {})

    new_table = dict(table)
    new_table[category] = {
        **prev_category,
        size: {**prev_size, date_key: quantity},
    }
    return new_table


def collect_all_date_keys(table: OrderTable, extra_keys: Iterable[str] = ()) -> List[str]:
    """Every date key in the table plus ``extra_keys``, sorted ascending."""
    keys = set(extra_keys)
    for sizes in table.values():
        for date_map in sizes.values():
            keys.update(date_map.keys())
    return sorted(keys)


def project_to_rows(table: OrderTable, date_keys: Sequence[str]) -> List[Row]:
    """Flatten the table to one row per (category, size) in insertion order."""
    rows = []
    for category, sizes in table.items():
        for size in sizes:
            rows.append(Row(
                item=f"{category} {size}",
                values=[get(table, category, size, key) for key in date_keys],
            ))
    return rows


def split_item(item: str) -> Tuple[str, str]:
    """
    Split a row label into (category, size) on the first space.

    Category names containing spaces cannot be recovered; rows are assumed
    to follow the "<category> <size...>" convention of the seed data.
    """
    parts = item.split(" ")
    return parts[0], " ".join(parts[1:])


def coerce_quantity(raw: CellValue) -> Optional[Quantity]:
    """
    Coerce a spreadsheet cell to a number.

    Blank cells count as 0. Returns None when the cell is not a finite
    number. Integral values come back as int.
    """
    if raw is None or raw == "":
        return 0
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return 0
        try:
            value = float(text)
        except ValueError:
            return None

    if math.isnan(value) or math.isinf(value):
        return None
    return int(value) if value.is_integer() else value


def merge_from_rows(header: Sequence[str], rows: Iterable[Row]) -> OrderTable:
    """
    Rebuild a table from spreadsheet rows.

    The first header column is the item label, the rest are date keys.
    Zero and invalid cells are left out, so explicit zeros stored remotely
    do not come back. The result replaces the local table entirely.
    """
    date_keys = list(header[1:])
    table: OrderTable = {}
    skipped = 0

    for row in rows:
        if not row.item:
            skipped += 1
            continue

        category, size = split_item(row.item)
        if not category or not size:
            skipped += 1
            continue

        date_map = table.setdefault(category, {}).setdefault(size, {})
        for idx, date_key in enumerate(date_keys):
            raw = row.values[idx] if idx < len(row.values) else None
            value = coerce_quantity(raw)
            if value is None or value == 0:
                continue
            date_map[date_key] = value

    if skipped:
        logger.debug(f"Skipped {skipped} rows without a category and size")

    return table
