"""Abstract interface (port) for Management API HTTP calls."""

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Port for issuing requests against the Management API.

    Paths are relative to the API endpoint (e.g. ``/o/acme/developers``).
    Every method returns the decoded response body, or None for an empty
    body, and raises ``ResponseError`` when the server rejects the call.
    """

    @abstractmethod
    def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        ...

    @abstractmethod
    def post(self, path: str, payload: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    def put(self, path: str, payload: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    def delete(self, path: str) -> Any:
        ...

    @property
    def debug_data(self) -> dict[str, Any] | None:
        """Summary of the last exchange, if the implementation records one."""
        return None
