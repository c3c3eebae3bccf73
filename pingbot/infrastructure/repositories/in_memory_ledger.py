"""Process-local notification ledger."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import assert_never

from pingbot.domain.entities import (
    Identifier,
    Notification,
    NotificationId,
    NotificationUrl,
)


class InMemoryNotificationLedger:
    """Ledger kept in memory, guarded by a lock for concurrent events."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 1
        self.notifications: list[Notification] = []
        self.usernames: dict[int, str] = {}

    def record_username(self, user_id: int, login: str) -> None:
        with self._lock:
            self.usernames[user_id] = login

    def record_notification(self, notification: Notification) -> Notification:
        with self._lock:
            stored = replace(notification, id=self._next_id)
            self._next_id += 1
            self.notifications.append(stored)
            return stored

    def delete_notification(self, user_id: int, identifier: Identifier) -> int:
        with self._lock:
            kept = [
                item
                for item in self.notifications
                if not _matches(item, user_id, identifier)
            ]
            deleted = len(self.notifications) - len(kept)
            self.notifications = kept
            return deleted

    def find_notification(
        self, user_id: int, identifier: Identifier
    ) -> Notification | None:
        with self._lock:
            for item in self.notifications:
                if _matches(item, user_id, identifier):
                    return item
        return None

    def list_for_user(self, user_id: int) -> list[Notification]:
        with self._lock:
            return [item for item in self.notifications if item.user_id == user_id]


def _matches(notification: Notification, user_id: int, identifier: Identifier) -> bool:
    if notification.user_id != user_id:
        return False
    if isinstance(identifier, NotificationId):
        return notification.id == identifier.value
    if isinstance(identifier, NotificationUrl):
        return notification.origin_url == identifier.url
    assert_never(identifier)


__all__ = ["InMemoryNotificationLedger"]
