"""httpx-based Transport — talks to the Management API over HTTPS.

Uses a synchronous ``httpx.Client`` with basic authentication and JSON
bodies. Any non-2xx reply, and any failure to get a reply at all, is raised
as a ResponseError.
"""

import logging
from typing import Any

import httpx

from management_api.application.interfaces.transport import Transport
from management_api.domain.exceptions import ResponseError

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Infrastructure adapter — connects to the Management API endpoint."""

    def __init__(
        self,
        endpoint: str,
        username: str = "",
        password: str = "",
        *,
        timeout: float = 30.0,
        user_agent: str = "management-api-client",
        http_client: httpx.Client | None = None,
    ):
        self._endpoint = endpoint.rstrip("/")
        self._auth = (username, password) if username else None
        self._timeout = timeout
        self._user_agent = user_agent
        self._http_client = http_client
        self._debug_data: dict[str, Any] | None = None

    @property
    def debug_data(self) -> dict[str, Any] | None:
        return self._debug_data

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

    def _get_client(self) -> httpx.Client:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.Client(timeout=self._timeout)

    def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, json=payload)

    def put(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("PUT", path, json=payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._endpoint}{path}"
        client = self._get_client()
        should_close = self._http_client is None

        logger.debug("%s %s", method, url)
        try:
            response = client.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._get_headers(),
                auth=self._auth,
            )
        except httpx.TransportError as exc:
            self._debug_data = {"method": method, "uri": url, "status_code": 0}
            logger.error("%s %s failed: %s", method, url, exc)
            raise ResponseError(0, str(exc), uri=url) from exc
        finally:
            if should_close:
                client.close()

        self._debug_data = {
            "method": method,
            "uri": str(response.request.url),
            "status_code": response.status_code,
        }

        if not response.is_success:
            self._raise_response_error(response, url)

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _raise_response_error(response: httpx.Response, url: str) -> None:
        """Parse the Management API error body and raise ResponseError."""
        try:
            body = response.json()
            message = body.get("message") or body.get("error", {}).get("message") or response.text
        except Exception:
            message = response.text or response.reason_phrase

        logger.warning("Management API error %d for %s: %s", response.status_code, url, message)
        raise ResponseError(response.status_code, message, uri=url)
