"""Turn mentions in an issue or comment into ledger pings.

Anyone can ping a person (``@login``) or every member of a team
(``@namespace/team``). The author of a text can later retract a ping by
writing ``acknowledge <url>``, which deletes their notification for that URL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pingbot.domain.entities import Event, Notification, NotificationUrl, User
from pingbot.domain.ports import NotificationLedger

from .gate import short_description, should_ping
from .outcome import attempt
from .resolver import IdentityResolver, to_ledger_id
from .scanner import (
    extract_acknowledgements,
    extract_mentions,
    is_team_reference,
    split_team_reference,
)

logger = logging.getLogger(__name__)


@dataclass
class PingReport:
    """What a single event did to the ledger."""

    acknowledged: list[str] = field(default_factory=list)
    notified_user_ids: list[int] = field(default_factory=list)
    gated: bool = False


def handle_ping_event(
    event: Event,
    *,
    ledger: NotificationLedger,
    resolver: IdentityResolver,
) -> PingReport:
    """Process acknowledgements and mentions found in ``event``'s body.

    Failures are logged and scoped to the mention or acknowledgement that
    caused them; this function does not raise.
    """

    report = PingReport()
    body = event.body
    if not body:
        return report

    _acknowledge(event, body, ledger=ledger, report=report)

    if not should_ping(event):
        report.gated = True
        return report

    origin_url = event.html_url
    if not origin_url:
        logger.warning("Skipping mentions of an event without a URL: %r", event)
        return report

    description = short_description(event)
    mentions = extract_mentions(body)
    logger.debug("Captured mentions: %s", list(mentions))

    seen: set[int] = set()
    for token in mentions:
        users, team_name = _resolve_mention(token, resolver)
        for user in users:
            assert user.id is not None
            if user.id in seen:
                continue
            seen.add(user.id)

            recorded = attempt(ledger.record_username, user.id, user.login)
            if not recorded.ok:
                logger.error("record username %s: %s", user.login, recorded.error)

            notification = Notification(
                id=None,
                user_id=user.id,
                origin_url=origin_url,
                origin_html=body,
                time=event.time,
                short_description=description,
                team_name=team_name,
            )
            pinged = attempt(ledger.record_notification, notification)
            if not pinged.ok:
                logger.error("record ping for %s: %s", user.login, pinged.error)
                continue
            report.notified_user_ids.append(user.id)

    return report


def _acknowledge(
    event: Event, body: str, *, ledger: NotificationLedger, report: PingReport
) -> None:
    urls = extract_acknowledgements(body)
    logger.debug("Captured acknowledgements: %s", urls)
    if not urls:
        return

    actor = event.actor
    if actor.id is None:
        logger.debug("Skipping acknowledgements by %s because no id found", actor.login)
        return
    converted = attempt(to_ledger_id, actor.id)
    if not converted.ok:
        logger.error("acknowledging as %s: %s", actor.login, converted.error)
        return

    for url in urls:
        deleted = attempt(ledger.delete_notification, converted.value, NotificationUrl(url))
        if not deleted.ok:
            logger.warning(
                "failed to delete notification: url=%s, user=%s: %s",
                url,
                actor.login,
                deleted.error,
            )
            continue
        report.acknowledged.append(url)


def _resolve_mention(
    token: str, resolver: IdentityResolver
) -> tuple[list[User], str | None]:
    """Return the users a mention token stands for and its team name."""

    if is_team_reference(token):
        # The namespace segment is not checked; only the team name matters.
        _, team_name = split_team_reference(token)
        resolved = attempt(resolver.resolve_team, team_name)
        if not resolved.ok:
            logger.error(
                "team ping (%s) failed to resolve to a known team: %s",
                token,
                resolved.error,
            )
            return [], None
        team = resolved.value
        if team is None:
            logger.error("team ping (%s) failed to resolve to a known team", token)
            return [], None
        users, errors = resolver.expand_team(team)
        for error in errors:
            logger.error("team ping (%s) skipped a member: %s", token, error)
        return users, team.name

    resolved_id = attempt(resolver.resolve_user, token)
    if not resolved_id.ok:
        logger.error("failed to get user %s ID: %s", token, resolved_id.error)
        return [], None
    if resolved_id.value is None:
        logger.debug("Skipping %s because no id found", token)
        return [], None
    return [User(login=token, id=resolved_id.value)], None


__all__ = ["PingReport", "handle_ping_event"]
