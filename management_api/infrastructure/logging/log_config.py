"""Per-category log levels for the client.

Call ``setup_logging()`` once from the application or script that owns the
process; the library itself never configures handlers.
"""

import logging
import sys

from management_api.config import get_settings

# Settings field -> logger names it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_transport": ("management_api.infrastructure.http",),
    "log_level_proxy": ("management_api.application.services",),
}


def setup_logging() -> None:
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)

    levels = {field: getattr(settings, field, "INFO") for field in _CATEGORY_MAP}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(levels[settings_field])
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Log levels applied: root=%s %s", settings.log_level, levels)


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
