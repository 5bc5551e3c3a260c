"""Pydantic DTOs for storing and restoring developer proxies."""

from typing import Any

from pydantic import BaseModel, Field


class DeveloperSnapshot(BaseModel):
    """Complete copy of a developer's fields for a caller-controlled store.

    ``debug_data`` is informational only and is never restored.
    """

    email: str | None = None
    developer_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    user_name: str | None = None
    organization_name: str | None = None
    status: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    apps: list[Any] = Field(default_factory=list)
    created_at: int | None = None
    created_by: str | None = None
    modified_at: int | None = None
    modified_by: str | None = None
    debug_data: dict[str, Any] | None = None

    model_config = {"from_attributes": True, "extra": "ignore"}
