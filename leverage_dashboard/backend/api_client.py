"""
tastytrade REST API client for the Futures Leverage Dashboard
One method per endpoint; every call is a single attempt with no retry.
"""

from typing import Any, Dict, List, Optional

import requests

from .. import config
from ..logging_setup import get_logger
from .errors import ApiRequestError, MalformedApiResponse

logger = get_logger(__name__)


class TastytradeClient:
    """Thin wrapper over the tastytrade endpoints the dashboard consumes."""

    def __init__(
        self,
        base_url: str = config.API_URL,
        timeout: Optional[float] = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            base_url: API root, without a trailing slash
            timeout: Per-request timeout in seconds; None waits on the network stack
            session: Optional preconfigured requests session
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": config.USER_AGENT,
        })

    def _request(
        self,
        method: str,
        path: str,
        session_token: Optional[str] = None,
        payload: Optional[Dict] = None,
    ) -> Dict[str, Any]:
        """
        Issue one request and return the ``data`` envelope of the response.

        Raises:
            ApiRequestError: transport failure or non-2xx status
            MalformedApiResponse: body is not JSON or has no ``data`` object
        """
        url = f"{self.base_url}{path}"
        headers = {"Authorization": session_token} if session_token else {}
        logger.debug(f"{method} {path}")
        try:
            response = self.session.request(method, url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning(f"{method} {path} failed: {exc.__class__.__name__}")
            raise ApiRequestError(f"Connection error: {exc}") from exc

        if not response.ok:
            logger.warning(f"{method} {path} returned HTTP {response.status_code}")
            raise ApiRequestError(f"HTTP {response.status_code}", status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedApiResponse(f"Response from {path} is not JSON.") from exc
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise MalformedApiResponse(f"Response from {path} has no data object.")
        return data

    @staticmethod
    def _items(data: Dict[str, Any], path: str) -> List[Dict]:
        items = data.get("items")
        if not isinstance(items, list):
            raise MalformedApiResponse(f"Response from {path} has no item list.")
        return items

    def create_session(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/sessions", payload=payload)

    def get_accounts(self, session_token: str) -> List[Dict]:
        path = "/customers/me/accounts"
        return self._items(self._request("GET", path, session_token), path)

    def get_balances(self, session_token: str, account_number: str) -> Dict[str, Any]:
        return self._request("GET", f"/accounts/{account_number}/balances", session_token)

    def get_positions(self, session_token: str, account_number: str) -> List[Dict]:
        path = f"/accounts/{account_number}/positions"
        return self._items(self._request("GET", path, session_token), path)

    def get_market_metrics(self, session_token: str, symbols: List[str]) -> List[Dict]:
        path = "/market-metrics"
        data = self._request("POST", path, session_token, payload={"symbols": list(symbols)})
        return self._items(data, path)
