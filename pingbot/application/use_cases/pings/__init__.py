"""Public helpers for turning mentions into pings."""

from .gate import short_description, should_ping
from .handle_event import PingReport, handle_ping_event
from .outcome import Outcome, attempt
from .resolver import IdentityResolver, to_ledger_id
from .scanner import (
    extract_acknowledgements,
    extract_mentions,
    is_team_reference,
    split_team_reference,
)

__all__ = [
    "IdentityResolver",
    "Outcome",
    "PingReport",
    "attempt",
    "extract_acknowledgements",
    "extract_mentions",
    "handle_ping_event",
    "is_team_reference",
    "short_description",
    "should_ping",
    "split_team_reference",
    "to_ledger_id",
]
