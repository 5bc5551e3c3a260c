"""Categorical types used by monetization resources (plans, developers, billing)."""

from .base import Type


class StatusType(Type):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class BillingType(Type):
    PREPAID = "PREPAID"
    POSTPAID = "POSTPAID"
    BOTH = "BOTH"


class DeveloperType(Type):
    """Trust level of a monetized developer."""

    TRUSTED = "TRUSTED"
    UNTRUSTED = "UNTRUSTED"
