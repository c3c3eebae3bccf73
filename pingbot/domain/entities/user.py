"""Domain entities describing accounts and teams on the platform."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """Account referenced by login; ``id`` stays ``None`` until resolved."""

    login: str
    id: int | None = None


@dataclass(frozen=True)
class TeamMember:
    """Member entry as published by the team directory."""

    login: str
    github_id: int


@dataclass
class Team:
    """Named group whose members are all pinged by a team mention."""

    name: str
    members: list[TeamMember] = field(default_factory=list)
