"""
Sheet Sync Proxy Routes

Relays GET/POST to the Google Apps Script web app. Status codes and
bodies are passed through byte-for-byte; CORS headers come from the app's
CORSMiddleware.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from api.dependencies import SheetsWebAppClient, get_sheets_client
from api.middleware.logging import get_request_id, record_upstream
from yuzuorders.models.orders import SheetPayload

logger = logging.getLogger("yuzuorders.api")

router = APIRouter()


async def _forward(
    request: Request,
    client: SheetsWebAppClient,
    method: str,
    body: Optional[bytes] = None,
) -> Response:
    start_time = time.perf_counter()
    upstream = await run_in_threadpool(client.forward, method, body)
    record_upstream(request, upstream.status_code, (time.perf_counter() - start_time) * 1000)

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type="application/json",
    )


@router.options("")
async def preflight() -> Response:
    """Answer preflight checks with an empty 200."""
    return Response(status_code=200)


@router.get("")
async def load_sheet(
    request: Request,
    client: SheetsWebAppClient = Depends(get_sheets_client),
) -> Response:
    """
    Load the order sheet.

    Returns the web app's ``{header, rows}`` document as-is.
    """
    return await _forward(request, client, "GET")


@router.post("")
async def save_sheet(
    request: Request,
    payload: SheetPayload,
    client: SheetsWebAppClient = Depends(get_sheets_client),
) -> Response:
    """
    Save the order sheet.

    The body must be a ``{header, rows}`` document; malformed shapes are
    rejected with 400 before anything is sent upstream.
    """
    logger.debug(
        f"[{get_request_id(request)}] Relaying {len(payload.rows)} rows "
        f"x {len(payload.date_keys)} dates"
    )
    return await _forward(request, client, "POST", await request.body())
