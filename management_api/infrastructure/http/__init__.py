"""HTTP infrastructure package."""

from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
