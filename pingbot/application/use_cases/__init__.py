"""Aggregate application use cases."""

from .pings import PingReport, handle_ping_event

__all__ = [
    "PingReport",
    "handle_ping_event",
]
