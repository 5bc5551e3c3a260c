from .base import Type
from .developer_status import DeveloperStatus
from .monetization import BillingType, DeveloperType, StatusType

__all__ = [
    "Type",
    "DeveloperStatus",
    "StatusType",
    "BillingType",
    "DeveloperType",
]
