"""HTTP directory client resolving GitHub logins and team memberships."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from pingbot.config import Settings, get_settings
from pingbot.domain.entities import Team, TeamMember
from pingbot.domain.errors import ResolutionError

logger = logging.getLogger(__name__)

_USER_AGENT = "pingbot (https://github.com/pingbot)"


class GitHubDirectory:
    """Directory backed by the GitHub REST API and the team directory API.

    Users are looked up on GitHub; teams come from a separate team directory
    that publishes one JSON document per team.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client or httpx.Client(timeout=self.settings.directory_timeout_seconds)

    def close(self) -> None:
        self._client.close()

    def get_user_id(self, login: str) -> int | None:
        url = f"{self.settings.github_api_url.rstrip('/')}/users/{quote(login, safe='')}"
        payload = self._get_json(url, headers=self._github_headers())
        if payload is None:
            return None
        user_id = payload.get("id") if isinstance(payload, dict) else None
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise ResolutionError(f"GitHub returned no numeric id for {login}")
        return user_id

    def get_team(self, name: str) -> Team | None:
        url = f"{self.settings.team_api_url.rstrip('/')}/teams/{quote(name, safe='')}.json"
        payload = self._get_json(url, headers={"User-Agent": _USER_AGENT})
        if payload is None:
            return None
        return _parse_team(name, payload)

    def _github_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": _USER_AGENT,
        }
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        return headers

    def _get_json(self, url: str, *, headers: dict[str, str]) -> Any | None:
        """Fetch ``url`` and decode it; ``None`` means the resource is absent."""

        try:
            response = self._client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Directory request to %s failed: %s", url, exc)
            raise ResolutionError(f"request to {url} failed: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("Directory has no entry at %s", url)
            return None
        if response.is_error:
            raise ResolutionError(
                f"request to {url} answered with status {response.status_code}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ResolutionError(f"request to {url} returned invalid JSON") from exc


def _parse_team(requested_name: str, payload: Any) -> Team:
    if not isinstance(payload, dict):
        raise ResolutionError(f"team {requested_name} payload is not an object")

    raw_members = payload.get("members") or []
    if not isinstance(raw_members, list):
        raise ResolutionError(f"team {requested_name} members are not a list")

    members: list[TeamMember] = []
    for entry in raw_members:
        if not isinstance(entry, dict):
            continue
        login = entry.get("github")
        github_id = entry.get("github_id")
        if not login or github_id is None:
            logger.debug("Ignoring incomplete member entry of team %s: %r", requested_name, entry)
            continue
        members.append(TeamMember(login=str(login), github_id=github_id))

    name = payload.get("name") or requested_name
    return Team(name=str(name), members=members)


__all__ = ["GitHubDirectory"]
