"""
Order Data Models

The order table is a plain nested mapping so it serializes straight to JSON:

    {category: {size: {"YYYY-MM-DD": quantity}}}

Rows and payloads are the flattened shape used at the spreadsheet boundary.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

# category -> size -> date key -> quantity
Quantity = Union[int, float]
DateMap = Dict[str, Quantity]
OrderTable = Dict[str, Dict[str, DateMap]]

# Cells coming back from a spreadsheet may be numbers, strings or blanks
CellValue = Optional[Union[int, float, str]]

# Sentinel label for the first header column
ITEM_HEADER = "Item"

SEED_ORDERS: OrderTable = {
    "tofu": {
        '9"': {},
        '8"': {},
        '7"': {},
        '6"': {},
    },
    "yuzu": {
        'SS 6"': {},
        "SS sliced": {},
    },
}


class Row(BaseModel):
    """One spreadsheet row: an item label and one cell per date column."""

    item: str = Field(..., description="'<category> <size>'")
    values: List[CellValue] = Field(
        ...,
        description="Quantities aligned with the header's date columns"
    )


class SheetPayload(BaseModel):
    """Body exchanged with the sync endpoint in both directions."""

    header: List[str] = Field(..., description="['Item', date keys...]")
    rows: List[Row] = Field(default_factory=list)

    @property
    def date_keys(self) -> List[str]:
        """Header columns after the item label."""
        return self.header[1:]
