"""Domain entity — local state of a Management API developer."""

from dataclasses import dataclass, field
from typing import Any

from management_api.domain.attributes import decode_attributes, encode_attributes


@dataclass
class Developer:
    """Field state of one developer, as last loaded or as edited locally.

    ``email`` is the external identifier. ``developer_id``,
    ``organization_name``, ``apps`` and the audit fields are assigned by the
    server and only change through :meth:`from_response`.
    """

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    user_name: str | None = None
    status: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    developer_id: str | None = None
    organization_name: str | None = None
    apps: list[Any] = field(default_factory=list)
    created_at: int | None = None
    created_by: str | None = None
    modified_at: int | None = None
    modified_by: str | None = None

    @property
    def is_persisted(self) -> bool:
        return self.created_at is not None

    def validate_user(self) -> bool:
        """Check the identity fields required for a save.

        Empty first/last names are filled in from the local and domain
        parts of the email address.
        """
        if self.email and self.email.find("@") > 0:
            local_part, domain_part = self.email.split("@", 1)
            if not self.first_name:
                self.first_name = local_part
            if not self.last_name:
                self.last_name = domain_part
        return bool(
            self.first_name
            and self.last_name
            and self.user_name
            and self.email
            and self.email.find("@") > 0
        )

    def to_payload(self, *, include_developer_id: bool = False) -> dict[str, Any]:
        """Build the create/update request body."""
        payload: dict[str, Any] = {
            "email": self.email,
            "userName": self.user_name,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "status": self.status,
        }
        attributes = encode_attributes(self.attributes)
        if attributes is not None:
            payload["attributes"] = attributes
        if include_developer_id and self.developer_id:
            payload["developerId"] = self.developer_id
        return payload

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "Developer":
        """Decode a raw developer object returned by the Management API."""
        raw_attributes = response.get("attributes")
        return cls(
            email=response.get("email"),
            first_name=response.get("firstName"),
            last_name=response.get("lastName"),
            user_name=response.get("userName"),
            status=response.get("status"),
            attributes=decode_attributes(raw_attributes) if isinstance(raw_attributes, list) else {},
            developer_id=response.get("developerId"),
            organization_name=response.get("organizationName"),
            apps=list(response.get("apps") or []),
            created_at=response.get("createdAt"),
            created_by=response.get("createdBy"),
            modified_at=response.get("lastModifiedAt"),
            modified_by=response.get("lastModifiedBy"),
        )
