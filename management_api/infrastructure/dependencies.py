"""Dependency wiring — builds proxies on top of the configured transport."""

import logging

from management_api.config import Settings, get_settings
from management_api.application.services import DeveloperProxy
from management_api.infrastructure.http import HttpxTransport

logger = logging.getLogger(__name__)


def get_transport(settings: Settings | None = None) -> HttpxTransport:
    """Provides an HttpxTransport for the configured endpoint and credentials."""
    settings = settings or get_settings()
    return HttpxTransport(
        endpoint=settings.endpoint,
        username=settings.username,
        password=settings.password,
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
    )


def get_developer_proxy(settings: Settings | None = None) -> DeveloperProxy:
    """Provides a blank DeveloperProxy for the configured organization."""
    settings = settings or get_settings()
    if not settings.org_name:
        logger.warning("ORG_NAME is not set; developer paths will not resolve")
    return DeveloperProxy(get_transport(settings), settings.org_name)
