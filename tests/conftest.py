"""Shared fixtures for the ping engine tests."""

from __future__ import annotations

import pathlib
import sys
from datetime import datetime, timezone

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pingbot.domain.entities import (
    Comment,
    Issue,
    IssueCommentAction,
    IssueCommentEvent,
    IssueEvent,
    IssuesAction,
    Team,
    TeamMember,
    User,
)
from pingbot.domain.errors import ResolutionError

EVENT_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
ISSUE_URL = "https://github.com/rust-lang/rust/issues/1"
COMMENT_URL = "https://github.com/rust-lang/rust/issues/1#issuecomment-10"


class FakeDirectory:
    """Directory answering from dictionaries and recording every lookup."""

    def __init__(
        self,
        users: dict[str, int] | None = None,
        teams: dict[str, Team] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.users = users or {}
        self.teams = teams or {}
        self.failing = failing or set()
        self.calls: list[tuple[str, str]] = []

    def get_user_id(self, login: str) -> int | None:
        self.calls.append(("user", login))
        if login in self.failing:
            raise ResolutionError(f"directory unavailable for {login}")
        return self.users.get(login)

    def get_team(self, name: str) -> Team | None:
        self.calls.append(("team", name))
        if name in self.failing:
            raise ResolutionError(f"directory unavailable for {name}")
        return self.teams.get(name)


def make_issue(body: str | None, *, author: User | None = None, html_url: str | None = ISSUE_URL) -> Issue:
    return Issue(
        number=1,
        title="ICE in borrowck",
        body=body,
        html_url=html_url,
        user=author or User(login="reporter", id=100),
        created_at=EVENT_TIME,
    )


def make_issue_event(
    body: str | None,
    action: IssuesAction = IssuesAction.OPENED,
    *,
    author: User | None = None,
    html_url: str | None = ISSUE_URL,
) -> IssueEvent:
    return IssueEvent(action=action, issue=make_issue(body, author=author, html_url=html_url))


def make_comment_event(
    body: str | None,
    action: IssueCommentAction = IssueCommentAction.CREATED,
    *,
    author: User | None = None,
) -> IssueCommentEvent:
    return IssueCommentEvent(
        action=action,
        issue=make_issue("original issue body"),
        comment=Comment(
            body=body,
            html_url=COMMENT_URL,
            user=author or User(login="commenter", id=200),
            updated_at=EVENT_TIME,
        ),
    )


@pytest.fixture()
def core_team() -> Team:
    return Team(
        name="core",
        members=[
            TeamMember(login="alice", github_id=7),
            TeamMember(login="bob", github_id=9),
        ],
    )


@pytest.fixture()
def directory(core_team: Team) -> FakeDirectory:
    return FakeDirectory(users={"alice": 7, "bob": 9, "carol": 11}, teams={"core": core_team})
