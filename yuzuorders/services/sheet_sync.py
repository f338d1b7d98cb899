"""
Sheet Sync

Serializes the order table to the spreadsheet row format and talks to the
sync proxy. Each call is one request-response cycle:

    IDLE -> IN_FLIGHT -> SUCCESS | FAILED

There is no retry or cancellation. Load failures are logged and reported
in the result; they never raise.
"""

import logging
from typing import Any, Dict, Optional, Sequence

import requests
from pydantic import ValidationError
from requests.exceptions import RequestException, Timeout

from yuzuorders.exceptions import MalformedPayload, TransportFailure
from yuzuorders.models.common import SyncOperation, SyncState
from yuzuorders.models.orders import ITEM_HEADER, OrderTable, SheetPayload
from yuzuorders.models.sync import SyncResult
from yuzuorders.services.order_store import (
    collect_all_date_keys,
    merge_from_rows,
    project_to_rows,
)

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = (
    "Failed to save to Google Sheets.\n"
    "- Check that the sync proxy is deployed and reachable.\n"
    "- Check the Apps Script web app URL (SHEETS_WEBAPP_URL) on the proxy."
)


# ============================================================================
# Serialization
# ============================================================================

def export_window(table: OrderTable, date_keys: Sequence[str]) -> SheetPayload:
    """Payload covering only the given (visible) date columns."""
    return SheetPayload(
        header=[ITEM_HEADER, *date_keys],
        rows=project_to_rows(table, date_keys),
    )


def export_all(table: OrderTable, window_keys: Sequence[str]) -> SheetPayload:
    """Payload covering every known date, always including the window."""
    return export_window(table, collect_all_date_keys(table, window_keys))


def parse_payload(data: Any) -> SheetPayload:
    """
    Validate a payload fetched from the proxy.

    Raises:
        MalformedPayload: header missing or shorter than 2 columns, rows
            missing or empty, or rows of the wrong shape
    """
    if not isinstance(data, dict):
        raise MalformedPayload(
            "Payload is not a JSON object",
            details={"type": type(data).__name__}
        )

    header = data.get("header")
    if not isinstance(header, list) or len(header) < 2:
        raise MalformedPayload("Header must list the item column and at least one date")

    rows = data.get("rows")
    if not isinstance(rows, list) or not rows:
        raise MalformedPayload("Payload has no rows")

    try:
        return SheetPayload.model_validate(data)
    except ValidationError as e:
        raise MalformedPayload(
            "Payload rows do not match the expected shape",
            details={"errors": e.errors()}
        ) from e


# ============================================================================
# Remote client
# ============================================================================

class SheetSync:
    """
    Client for the sync proxy.

    Usage:
        sync = SheetSync("http://localhost:8000/sync")

        result = sync.import_from_remote()
        if result.success:
            table = result.table

        result = sync.export_to_remote(table, window_keys)
    """

    def __init__(
        self,
        sync_url: str,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        self.sync_url = sync_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.state = SyncState.IDLE

    def _request(self, method: str, decode: bool = True, **kwargs) -> Any:
        """Send one request and decode the JSON body, if asked to."""
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, self.sync_url, **kwargs)
        except Timeout as e:
            raise TransportFailure("Request timed out") from e
        except RequestException as e:
            raise TransportFailure(f"Request failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise TransportFailure(
                f"Sync endpoint returned {response.status_code}",
                status_code=response.status_code,
                details={"body": response.text[:500]}
            )

        if not decode or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MalformedPayload("Response body is not valid JSON") from e

    def import_from_remote(self) -> SyncResult:
        """
        Fetch the sheet and rebuild the order table from it.

        Returns:
            SyncResult whose ``table`` replaces the local table on success.
            On failure the caller keeps its current table.
        """
        self.state = SyncState.IN_FLIGHT
        try:
            payload = parse_payload(self._request("GET"))
        except TransportFailure as e:
            self.state = SyncState.FAILED
            logger.warning(f"Failed to load from Google Sheets: {e.message}")
            return SyncResult(
                operation=SyncOperation.IMPORT,
                state=SyncState.FAILED,
                error=e.message,
                status_code=e.status_code,
            )
        except MalformedPayload as e:
            self.state = SyncState.FAILED
            logger.warning(f"Ignoring malformed sheet payload: {e.message}")
            return SyncResult(
                operation=SyncOperation.IMPORT,
                state=SyncState.FAILED,
                error=e.message,
            )

        table = merge_from_rows(payload.header, payload.rows)
        self.state = SyncState.SUCCESS
        logger.info(
            f"Loaded {len(payload.rows)} rows across "
            f"{len(payload.date_keys)} dates from Google Sheets"
        )
        return SyncResult(
            operation=SyncOperation.IMPORT,
            state=SyncState.SUCCESS,
            table=table,
            status_code=200,
            rows_count=len(payload.rows),
        )

    def export_to_remote(
        self,
        table: OrderTable,
        date_keys: Sequence[str],
        include_history: bool = True,
    ) -> SyncResult:
        """
        Send the table to the sheet.

        Args:
            table: Snapshot to send; never modified
            date_keys: Visible window keys
            include_history: Send every known date (default) rather than
                only the visible window

        Returns:
            SyncResult with a user-facing ``error`` on failure
        """
        if include_history:
            payload = export_all(table, date_keys)
        else:
            payload = export_window(table, date_keys)
        body: Dict[str, Any] = payload.model_dump()

        self.state = SyncState.IN_FLIGHT
        try:
            self._request(
                "POST",
                decode=False,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except TransportFailure as e:
            self.state = SyncState.FAILED
            logger.error(f"Failed to save to Google Sheets: {e.message}")
            return SyncResult(
                operation=SyncOperation.EXPORT,
                state=SyncState.FAILED,
                error=SAVE_FAILED_MESSAGE,
                status_code=e.status_code,
            )

        self.state = SyncState.SUCCESS
        logger.info(
            f"Saved {len(payload.rows)} rows across "
            f"{len(payload.date_keys)} dates to Google Sheets"
        )
        return SyncResult(
            operation=SyncOperation.EXPORT,
            state=SyncState.SUCCESS,
            status_code=200,
            rows_count=len(payload.rows),
        )
