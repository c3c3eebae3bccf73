"""Domain entities for the webhook events that can trigger pings.

``Event`` is a closed union of two variants. Code that needs to tell them
apart checks both with ``isinstance`` and finishes with ``assert_never`` so a
new variant fails type checking at every dispatch site.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from .user import User


class IssuesAction(str, Enum):
    """Actions GitHub reports for ``issues`` events."""

    OPENED = "opened"
    EDITED = "edited"
    DELETED = "deleted"
    CLOSED = "closed"
    REOPENED = "reopened"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    TRANSFERRED = "transferred"
    MILESTONED = "milestoned"
    DEMILESTONED = "demilestoned"
    PINNED = "pinned"
    UNPINNED = "unpinned"


class IssueCommentAction(str, Enum):
    """Actions GitHub reports for ``issue_comment`` events."""

    CREATED = "created"
    EDITED = "edited"
    DELETED = "deleted"


@dataclass(frozen=True)
class Issue:
    """Issue or pull request the event refers to."""

    number: int
    title: str
    body: str | None
    html_url: str | None
    user: User
    created_at: datetime


@dataclass(frozen=True)
class Comment:
    """Comment posted on an issue."""

    body: str | None
    html_url: str | None
    user: User
    updated_at: datetime


@dataclass(frozen=True)
class IssueEvent:
    action: IssuesAction
    issue: Issue

    @property
    def body(self) -> str | None:
        return self.issue.body

    @property
    def html_url(self) -> str | None:
        return self.issue.html_url

    @property
    def actor(self) -> User:
        return self.issue.user

    @property
    def time(self) -> datetime:
        return self.issue.created_at


@dataclass(frozen=True)
class IssueCommentEvent:
    action: IssueCommentAction
    issue: Issue
    comment: Comment

    @property
    def body(self) -> str | None:
        return self.comment.body

    @property
    def html_url(self) -> str | None:
        return self.comment.html_url

    @property
    def actor(self) -> User:
        return self.comment.user

    @property
    def time(self) -> datetime:
        return self.comment.updated_at


Event = Union[IssueEvent, IssueCommentEvent]


__all__ = [
    "Comment",
    "Event",
    "Issue",
    "IssueCommentAction",
    "IssueCommentEvent",
    "IssueEvent",
    "IssuesAction",
]
