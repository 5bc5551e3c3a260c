"""Developer proxy — keeps a local Developer in sync with the Management API."""

import logging
from collections.abc import Mapping
from dataclasses import asdict, replace
from enum import Enum
from typing import Any
from urllib.parse import quote

from management_api.application.interfaces import Transport
from management_api.application.schemas.developer import DeveloperSnapshot
from management_api.domain.entities import Developer
from management_api.domain.exceptions import ParameterError, ResponseError
from management_api.domain.types import DeveloperStatus

logger = logging.getLogger(__name__)


class PersistMode(str, Enum):
    """How :meth:`DeveloperProxy.persist` reaches the server."""

    CREATE_ONLY = "create_only"
    UPDATE_ONLY = "update_only"
    UPDATE_THEN_CREATE_ON_NOT_FOUND = "update_then_create_on_not_found"


class DeveloperProxy:
    """Local proxy for one developer of an organization.

    A proxy starts blank. ``load`` or a successful save replaces every field
    with the server's copy; deleting the proxy's own developer blanks it
    again. Instances hold mutable state and belong to a single thread of
    control; share one across threads only behind an external lock.
    """

    def __init__(self, transport: Transport, org_name: str):
        self._transport = transport
        self._org_name = org_name
        self._base_path = f"/o/{quote(org_name, safe='')}/developers"
        self._developer = Developer()
        self._loaded = False

    # ── Accessors ──────────────────────────────────────────────────

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def email(self) -> str | None:
        return self._developer.email

    @email.setter
    def email(self, value: str | None) -> None:
        self._developer.email = value

    @property
    def first_name(self) -> str | None:
        return self._developer.first_name

    @first_name.setter
    def first_name(self, value: str | None) -> None:
        self._developer.first_name = value

    @property
    def last_name(self) -> str | None:
        return self._developer.last_name

    @last_name.setter
    def last_name(self, value: str | None) -> None:
        self._developer.last_name = value

    @property
    def user_name(self) -> str | None:
        return self._developer.user_name

    @user_name.setter
    def user_name(self, value: str | None) -> None:
        self._developer.user_name = value

    @property
    def status(self) -> str | None:
        return self._developer.status

    @status.setter
    def status(self, value: Any) -> None:
        """Accepts "active"/"inactive", booleans, or 0/1."""
        self._developer.status = DeveloperStatus.normalize(value)

    @property
    def developer_id(self) -> str | None:
        return self._developer.developer_id

    @property
    def organization_name(self) -> str | None:
        return self._developer.organization_name

    @property
    def apps(self) -> list[Any]:
        return list(self._developer.apps)

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._developer.attributes)

    @property
    def created_at(self) -> int | None:
        return self._developer.created_at

    @property
    def created_by(self) -> str | None:
        return self._developer.created_by

    @property
    def modified_at(self) -> int | None:
        return self._developer.modified_at

    @property
    def modified_by(self) -> str | None:
        return self._developer.modified_by

    @property
    def debug_data(self) -> dict[str, Any] | None:
        return self._transport.debug_data

    def get_attribute(self, name: str) -> Any | None:
        """Return the attribute value, or None if the developer has no such attribute."""
        return self._developer.attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._developer.attributes[name] = value

    def validate_user(self) -> bool:
        return self._developer.validate_user()

    def blank_values(self) -> None:
        """Reset every field to its blank default."""
        self._developer = Developer()
        self._loaded = False

    # ── Lifecycle ──────────────────────────────────────────────────

    def load(self, email: str) -> None:
        """Fetch a developer by email and replace this proxy's state with it."""
        response = self._transport.get(self._path(email))
        self._apply_response(response)

    def validate(self, email: str | None = None) -> bool:
        """Return True if a developer with this email exists on the server."""
        if not email:
            return False
        try:
            self._transport.get(self._path(email))
        except ResponseError as exc:
            if exc.is_not_found:
                logger.debug("Developer %s does not exist", email)
            else:
                logger.warning(
                    "Existence check for developer %s failed with %d: %s",
                    email, exc.status_code, exc.message,
                )
            return False
        return True

    def persist(self, mode: PersistMode) -> None:
        """Send the full local field set to the server and reload from its reply.

        Raises:
            ParameterError: identity fields are missing; nothing is sent.
            ResponseError: the server rejected the request.
        """
        if mode is PersistMode.UPDATE_THEN_CREATE_ON_NOT_FOUND:
            try:
                self.persist(PersistMode.UPDATE_ONLY)
            except ResponseError as exc:
                if not exc.is_not_found:
                    raise
                logger.info("Developer %s not found on update; creating it", self.email)
                self.persist(PersistMode.CREATE_ONLY)
            return

        if not self._developer.validate_user():
            raise ParameterError(
                "Developer requires valid-looking email address, firstName, lastName and userName."
            )

        if mode is PersistMode.UPDATE_ONLY:
            payload = self._developer.to_payload(include_developer_id=True)
            response = self._transport.put(self._path(self._developer.email), payload)
        else:
            payload = self._developer.to_payload()
            response = self._transport.post(self._base_path, payload)

        self._apply_response(response)
        logger.debug("Saved developer %s (%s)", self.email, mode.value)

    def save(self, force_update: bool | None = False) -> None:
        """Persist using the boolean-or-None convention.

        None tries an update and falls back to a create on 404, True always
        updates, False always creates.
        """
        if force_update is None:
            mode = PersistMode.UPDATE_THEN_CREATE_ON_NOT_FOUND
        elif force_update:
            mode = PersistMode.UPDATE_ONLY
        else:
            mode = PersistMode.CREATE_ONLY
        self.persist(mode)

    def delete(self, email: str | None = None) -> None:
        """Delete a developer, by default this proxy's own developer."""
        email = email or self._developer.email
        if not email:
            raise ParameterError("No developer email given to delete.")
        self._transport.delete(self._path(email))
        if email == self._developer.email:
            self.blank_values()

    def list_developers(self) -> Any:
        """Return the raw developer listing (a list of emails)."""
        return self._transport.get(self._base_path)

    def load_all_developers(self) -> list["DeveloperProxy"]:
        """Fetch every developer of the organization as populated proxies."""
        response = self._transport.get(self._base_path, params={"expand": "true"})
        developers: list[DeveloperProxy] = []
        if not isinstance(response, Mapping):
            logger.warning("Expanded developer listing returned %s; expected an object", type(response).__name__)
            return developers
        for item in response.get("developer") or []:
            if not isinstance(item, Mapping):
                logger.debug("Skipping malformed developer entry: %r", item)
                continue
            developer = DeveloperProxy(self._transport, self._org_name)
            developer._apply_response(item)
            developers.append(developer)
        return developers

    # ── Snapshots ──────────────────────────────────────────────────

    def to_snapshot(self) -> DeveloperSnapshot:
        return DeveloperSnapshot(
            **asdict(self._developer),
            debug_data=self._transport.debug_data,
        )

    def from_snapshot(self, data: DeveloperSnapshot | Mapping[str, Any]) -> None:
        """Restore fields from a snapshot; unknown keys and ``debug_data`` are ignored."""
        if not isinstance(data, DeveloperSnapshot):
            data = DeveloperSnapshot.model_validate(dict(data))
        values = data.model_dump(exclude_unset=True, exclude={"debug_data"})
        self._developer = replace(self._developer, **values)
        self._loaded = True

    # ── Internals ──────────────────────────────────────────────────

    def _path(self, email: str) -> str:
        return f"{self._base_path}/{quote(email, safe='')}"

    def _apply_response(self, response: Any) -> None:
        if not isinstance(response, Mapping):
            raise ResponseError(
                0,
                f"Expected a developer object in the response, got {type(response).__name__}",
                uri=self._base_path,
            )
        self._developer = Developer.from_response(response)
        self._loaded = True
