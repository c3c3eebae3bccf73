"""Repository implementations for infrastructure layer."""

from .in_memory_ledger import InMemoryNotificationLedger
from .notification_repository import NotificationRepository

__all__ = [
    "InMemoryNotificationLedger",
    "NotificationRepository",
]
