"""Webhook endpoint feeding GitHub issue and comment events to the ping engine."""

from __future__ import annotations

import json
import logging
from enum import Enum
from functools import partial

from anyio import to_thread
from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from pingbot.application.use_cases.pings import IdentityResolver, handle_ping_event
from pingbot.domain.entities import IssueCommentAction, IssuesAction
from pingbot.infrastructure.database import get_db
from pingbot.infrastructure.repositories import NotificationRepository
from pingbot.interfaces.api.dependencies import (
    get_identity_resolver,
    verify_github_signature,
)
from pingbot.interfaces.api.schemas import (
    IssueCommentEventPayload,
    IssuesEventPayload,
    WebhookResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])

_HANDLED_EVENTS: dict[
    str, tuple[type[IssuesEventPayload] | type[IssueCommentEventPayload], type[Enum]]
] = {
    "issues": (IssuesEventPayload, IssuesAction),
    "issue_comment": (IssueCommentEventPayload, IssueCommentAction),
}


@router.post("/github-hook", response_model=WebhookResponse)
async def github_hook(
    x_github_event: str | None = Header(default=None),
    body: bytes = Depends(verify_github_signature),
    db: Session = Depends(get_db),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> WebhookResponse:
    """Record pings and acknowledgements found in a webhook delivery."""

    handled = _HANDLED_EVENTS.get(x_github_event or "")
    if handled is None:
        logger.debug("Ignoring unsupported event %s", x_github_event)
        return WebhookResponse(status="ignored")
    payload_type, action_type = handled

    try:
        raw = json.loads(body)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Payload is not valid JSON",
        ) from exc

    action = raw.get("action") if isinstance(raw, dict) else None
    if action not in {member.value for member in action_type}:
        logger.debug("Ignoring %s event with action %r", x_github_event, action)
        return WebhookResponse(status="ignored")

    try:
        payload = payload_type.model_validate(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc

    event = payload.to_event()
    report = await to_thread.run_sync(
        partial(
            handle_ping_event,
            event,
            ledger=NotificationRepository(db),
            resolver=resolver,
        )
    )
    return WebhookResponse(
        status="processed",
        acknowledged=report.acknowledged,
        notified_user_ids=report.notified_user_ids,
    )
