"""Attribute bag marshaling.

On the wire, custom attributes travel as an ordered list of
``{"name": ..., "value": ...}`` records. In memory they are a plain dict,
so names are unique.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)


def encode_attributes(attributes: Mapping[str, Any]) -> list[dict[str, Any]] | None:
    """Convert a mapping to wire records, in insertion order.

    Returns None for an empty mapping so callers can omit the field.
    """
    if not attributes:
        return None
    return [{"name": name, "value": value} for name, value in attributes.items()]


def decode_attributes(items: Iterable[Any] | None) -> dict[str, Any]:
    """Fold wire records into a dict. Later duplicates win; malformed records are skipped."""
    attributes: dict[str, Any] = {}
    if not items:
        return attributes
    for item in items:
        if not isinstance(item, Mapping) or "name" not in item or "value" not in item:
            logger.debug("Skipping malformed attribute record: %r", item)
            continue
        attributes[item["name"]] = item["value"]
    return attributes
