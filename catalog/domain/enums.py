"""Domain enumerations for the catalog service.

Enums represent fixed sets of domain values (order status, item labels).
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class ItemLabel(str, Enum):
    """Well-known item labels backing the storefront lists."""

    HIT = "hit"
    REC = "rec"


class FilterType(str, Enum):
    """How a category filter constrains item attributes."""

    EQUALITY = "equality"
    RANGE = "range"
