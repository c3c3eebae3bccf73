"""Pydantic models describing the GitHub webhook payloads we consume."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from pingbot.domain.entities import (
    Comment,
    Issue,
    IssueCommentAction,
    IssueCommentEvent,
    IssueEvent,
    IssuesAction,
    User,
)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class GitHubUserPayload(_Payload):
    login: str
    id: int | None = None

    def to_entity(self) -> User:
        return User(login=self.login, id=self.id)


class GitHubIssuePayload(_Payload):
    number: int
    title: str
    body: str | None = None
    html_url: str | None = None
    user: GitHubUserPayload
    created_at: datetime

    def to_entity(self) -> Issue:
        return Issue(
            number=self.number,
            title=self.title,
            body=self.body,
            html_url=self.html_url,
            user=self.user.to_entity(),
            created_at=self.created_at,
        )


class GitHubCommentPayload(_Payload):
    body: str | None = None
    html_url: str | None = None
    user: GitHubUserPayload
    updated_at: datetime

    def to_entity(self) -> Comment:
        return Comment(
            body=self.body,
            html_url=self.html_url,
            user=self.user.to_entity(),
            updated_at=self.updated_at,
        )


class IssuesEventPayload(_Payload):
    """Body of an ``issues`` webhook delivery."""

    action: IssuesAction
    issue: GitHubIssuePayload

    def to_event(self) -> IssueEvent:
        return IssueEvent(action=self.action, issue=self.issue.to_entity())


class IssueCommentEventPayload(_Payload):
    """Body of an ``issue_comment`` webhook delivery."""

    action: IssueCommentAction
    issue: GitHubIssuePayload
    comment: GitHubCommentPayload

    def to_event(self) -> IssueCommentEvent:
        return IssueCommentEvent(
            action=self.action,
            issue=self.issue.to_entity(),
            comment=self.comment.to_entity(),
        )


class WebhookResponse(BaseModel):
    """Summary returned to GitHub for each delivery."""

    status: str
    acknowledged: list[str] = []
    notified_user_ids: list[int] = []


__all__ = [
    "GitHubCommentPayload",
    "GitHubIssuePayload",
    "GitHubUserPayload",
    "IssueCommentEventPayload",
    "IssuesEventPayload",
    "WebhookResponse",
]
