"""Capabilities the ping engine consumes from the outside world."""

from __future__ import annotations

from typing import Protocol

from pingbot.domain.entities import Identifier, Notification, Team


class Directory(Protocol):
    """Look up accounts and teams on the collaboration platform.

    Both methods return ``None`` when the name is unknown and raise
    :class:`~pingbot.domain.errors.ResolutionError` when the lookup itself
    fails.
    """

    def get_user_id(self, login: str) -> int | None: ...

    def get_team(self, name: str) -> Team | None: ...


class NotificationLedger(Protocol):
    """Persistence contract for recorded pings.

    Every call is its own transaction; a failure only affects that call.
    """

    def record_username(self, user_id: int, login: str) -> None: ...

    def record_notification(self, notification: Notification) -> Notification: ...

    def delete_notification(self, user_id: int, identifier: Identifier) -> int: ...

    def find_notification(
        self, user_id: int, identifier: Identifier
    ) -> Notification | None: ...


__all__ = ["Directory", "NotificationLedger"]
