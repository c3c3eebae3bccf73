"""Domain entities representing recorded pings and how to address them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass
class Notification:
    """A ping addressed to one account, waiting to be delivered.

    ``team_name`` is set when the ping came from a team mention and ``None``
    for a direct mention. Only ``user_id`` and ``origin_url`` identify the
    row for deletion; the remaining fields are payload.
    """

    id: int | None
    user_id: int
    origin_url: str
    origin_html: str
    time: datetime
    short_description: str | None = None
    team_name: str | None = None


@dataclass(frozen=True)
class NotificationId:
    """Locate a notification by its ledger row id."""

    value: int


@dataclass(frozen=True)
class NotificationUrl:
    """Locate a notification by the URL of the text that triggered it."""

    url: str


Identifier = Union[NotificationId, NotificationUrl]


__all__ = ["Identifier", "Notification", "NotificationId", "NotificationUrl"]
