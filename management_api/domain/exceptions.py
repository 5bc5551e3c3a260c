"""Domain-specific exceptions — transport-independent."""

from http import HTTPStatus


class ManagementApiError(Exception):
    """Base class for every error raised by this package."""


class ParameterError(ManagementApiError, ValueError):
    """Raised locally, before any network call, when an input value is invalid.

    Covers invalid developer status values, failed identity validation
    ahead of a save, and values outside a declared ``Type`` set.
    """


class ResponseError(ManagementApiError):
    """Raised by a transport when the Management API rejects a request.

    ``status_code`` is the HTTP status; ``0`` means there was no usable
    response (connection refused, timeout, an empty or malformed body).
    """

    def __init__(self, status_code: int, message: str, uri: str | None = None):
        self.status_code = status_code
        self.message = message
        self.uri = uri
        super().__init__(f"{status_code}: {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND
