"""
API Dependencies

Dependency injection for the upstream Sheets client.
"""

import logging
from functools import lru_cache
from typing import Optional

import requests
from requests.exceptions import RequestException, Timeout

from api.config import get_settings
from api.middleware.errors import UpstreamError

logger = logging.getLogger("yuzuorders.api")


class SheetsWebAppClient:
    """
    Thin relay to the Apps Script web app.

    Returns the upstream status code and body text untouched.
    """

    def __init__(
        self,
        webapp_url: Optional[str],
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.webapp_url = webapp_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def forward(self, method: str, body: Optional[bytes] = None) -> requests.Response:
        """
        Forward a request upstream.

        Raises:
            UpstreamError: URL not configured or upstream unreachable
        """
        if not self.webapp_url:
            raise UpstreamError("SHEETS_WEBAPP_URL is not configured")

        kwargs = {"timeout": self.timeout}
        if method == "POST":
            kwargs["data"] = body or b""
            kwargs["headers"] = {"Content-Type": "application/json"}

        try:
            return self.session.request(method, self.webapp_url, **kwargs)
        except Timeout as e:
            raise UpstreamError("Upstream request timed out") from e
        except RequestException as e:
            logger.error(f"Upstream {method} failed: {e}")
            raise UpstreamError(str(e)) from e


@lru_cache()
def get_sheets_client() -> SheetsWebAppClient:
    """Get singleton upstream client."""
    settings = get_settings()
    return SheetsWebAppClient(
        webapp_url=settings.sheets_webapp_url,
        timeout=settings.upstream_timeout,
    )
