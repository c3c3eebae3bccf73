"""Domain entities exposed by the application."""

from .event import (
    Comment,
    Event,
    Issue,
    IssueCommentAction,
    IssueCommentEvent,
    IssueEvent,
    IssuesAction,
)
from .notification import Identifier, Notification, NotificationId, NotificationUrl
from .user import Team, TeamMember, User

__all__ = [
    "Comment",
    "Event",
    "Issue",
    "IssueCommentAction",
    "IssueCommentEvent",
    "IssueEvent",
    "IssuesAction",
    "Identifier",
    "Notification",
    "NotificationId",
    "NotificationUrl",
    "Team",
    "TeamMember",
    "User",
]
