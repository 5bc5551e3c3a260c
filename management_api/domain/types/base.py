"""Closed value types — classes whose upper-case constants are the legal values.

Usage:
    class StatusType(Type):
        ACTIVE = "ACTIVE"
        INACTIVE = "INACTIVE"

    StatusType.get("ACTIVE")    # -> "ACTIVE"
    StatusType.get("DELETED")   # raises ParameterError
"""

import threading
from typing import Any

from management_api.domain.exceptions import ParameterError


class Type:
    """Base class for closed categorical types.

    Declared constants are reflected once per subclass and cached for the
    lifetime of the process. Subclasses must not change their constants
    after first use.
    """

    _concrete_types: dict[type, frozenset[Any]] = {}
    _cache_lock = threading.Lock()

    @classmethod
    def get(cls, value: Any) -> Any:
        """Return ``value`` unchanged if it is one of the declared constants.

        Raises:
            ParameterError: if ``value`` is not declared on this type.
        """
        try:
            declared = value in cls.values()
        except TypeError:  # unhashable
            declared = False
        if declared:
            return value
        raise ParameterError(
            f"Value type '{value}' is not defined in type '{cls.__name__}'"
        )

    @classmethod
    def values(cls) -> frozenset[Any]:
        """The declared constant values of this type."""
        cached = Type._concrete_types.get(cls)
        if cached is not None:
            return cached
        with Type._cache_lock:
            if cls not in Type._concrete_types:
                Type._concrete_types[cls] = cls._reflect_constants()
            return Type._concrete_types[cls]

    @classmethod
    def _reflect_constants(cls) -> frozenset[Any]:
        constants: dict[str, Any] = {}
        # Walk base-first so subclasses can redeclare an inherited constant.
        for klass in reversed(cls.__mro__):
            if not issubclass(klass, Type) or klass is Type:
                continue
            for name, value in vars(klass).items():
                if name.isupper() and not name.startswith("_") and not callable(value):
                    constants[name] = value
        return frozenset(constants.values())
