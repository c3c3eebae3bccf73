"""Resolve mention tokens to ledger account ids through the directory."""

from __future__ import annotations

import logging
from typing import Final

from pingbot.domain.entities import Team, User
from pingbot.domain.errors import IdentifierRangeError
from pingbot.domain.ports import Directory

logger = logging.getLogger(__name__)

# Ledger ids are stored in a signed 64-bit column.
LEDGER_ID_MAX: Final[int] = 2**63 - 1


def to_ledger_id(value: object) -> int:
    """Convert an external account id into a ledger id or fail."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise IdentifierRangeError(f"user id {value!r} is not an integer")
    if value < 0 or value > LEDGER_ID_MAX:
        raise IdentifierRangeError(f"user id {value} out of bounds")
    return value


class IdentityResolver:
    """Map logins and team names onto ``(id, login)`` pairs.

    Nothing is cached: each call goes to the directory so that membership
    changes are visible on the next event.
    """

    def __init__(self, directory: Directory) -> None:
        self.directory = directory

    def resolve_user(self, login: str) -> int | None:
        raw_id = self.directory.get_user_id(login)
        if raw_id is None:
            logger.debug("No account found for login %s", login)
            return None
        return to_ledger_id(raw_id)

    def resolve_team(self, name: str) -> Team | None:
        if not name:
            return None
        return self.directory.get_team(name)

    @staticmethod
    def expand_team(team: Team) -> tuple[list[User], list[IdentifierRangeError]]:
        """Return the team's members as users, skipping unusable ids.

        A member whose id cannot be stored is left out and its error is
        returned next to the members that could be converted.
        """

        users: list[User] = []
        errors: list[IdentifierRangeError] = []
        for member in team.members:
            try:
                member_id = to_ledger_id(member.github_id)
            except IdentifierRangeError as exc:
                errors.append(exc)
                continue
            users.append(User(login=member.login, id=member_id))
        return users, errors


__all__ = ["IdentityResolver", "LEDGER_ID_MAX", "to_ledger_id"]
