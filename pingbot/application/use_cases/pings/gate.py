"""Decide whether an event should produce new pings."""

from __future__ import annotations

from typing import assert_never

from pingbot.domain.entities import (
    Event,
    IssueCommentAction,
    IssueCommentEvent,
    IssueEvent,
    IssuesAction,
)


def should_ping(event: Event) -> bool:
    """Return ``True`` when mentions in ``event`` must be turned into pings.

    Only freshly opened issues and freshly created comments qualify, so that
    editing a body never re-notifies everybody mentioned in it. An edit that
    adds a new mention is therefore not picked up either.
    """

    if isinstance(event, IssueEvent):
        return event.action is IssuesAction.OPENED
    if isinstance(event, IssueCommentEvent):
        return event.action is IssueCommentAction.CREATED
    assert_never(event)


def short_description(event: Event) -> str:
    """Return the one-line summary stored alongside each ping."""

    if isinstance(event, IssueEvent):
        return event.issue.title
    if isinstance(event, IssueCommentEvent):
        return f"Comment on {event.issue.title}"
    assert_never(event)


__all__ = ["should_ping", "short_description"]
