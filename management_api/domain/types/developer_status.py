"""Developer status values accepted by the Management API."""

from typing import Any

from .base import Type


class DeveloperStatus(Type):
    """A developer is either active or inactive."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def normalize(cls, status: Any) -> str:
        """Map booleans and 0/1 onto status strings, then validate.

        Only real ``bool``/``int`` values are mapped; ``"1"`` is rejected.
        """
        if isinstance(status, bool):
            status = cls.ACTIVE if status else cls.INACTIVE
        elif isinstance(status, int) and status in (0, 1):
            status = cls.ACTIVE if status == 1 else cls.INACTIVE
        return cls.get(status)
