"""
HTTP client for the instruments API.

Every fetch is a single GET against the collection root; failures of any
kind are raised as CatalogError with the server's message when it sent one.
"""

from typing import Optional
from urllib.parse import quote

import requests

from instrumentarium.config import config


class CatalogError(Exception):
    """A fetch against the instruments API failed."""

    def __init__(self, message: str, status: Optional[int] = None, details: list = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details or []


class CatalogClient:
    def __init__(self, base_url: str = None, timeout: float = None, session: requests.Session = None):
        self.base_url = (base_url or config.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api_timeout
        self.session = session or requests.Session()

    def _get(self, path: str = "", params: dict = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise CatalogError(f"Could not reach {url}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            message = body.get("error") or f"HTTP {response.status_code}"
            raise CatalogError(message, status=response.status_code, details=body.get("details"))
        return body

    def fetch_instruments(
        self,
        category: str = None,
        family: str = None,
        difficulty: str = None,
        search: str = None,
    ) -> list[dict]:
        """Fetch instruments, optionally filtered on the server."""
        params = {
            "category": category,
            "family": family,
            "difficulty": difficulty,
            "search": search,
        }
        body = self._get(params={k: v for k, v in params.items() if v})
        return body.get("instruments", [])

    def fetch_instrument(self, instrument_id: str) -> dict:
        body = self._get(f"/{quote(instrument_id, safe='')}")
        return _require(body, "instrument")

    def fetch_categories(self) -> list[str]:
        body = self._get("/categories")
        return body.get("categories", [])

    def fetch_stats(self) -> dict:
        body = self._get("/stats")
        _require(body, "total")
        _require(body, "by_category")
        return body


def _require(body: dict, key: str):
    if key not in body:
        raise CatalogError(f"Unexpected response from the instruments API: no '{key}'")
    return body[key]
