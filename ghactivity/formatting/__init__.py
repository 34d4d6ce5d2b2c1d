"""Event-to-text formatting for GitHub activity feeds."""

from __future__ import annotations

from .kinds import EventKind, parse_kind
from .payloads import payload_view
from .render import (
    NO_ACTIVITY_TEMPLATE,
    UNKNOWN_REPOSITORY,
    format_event,
    format_events,
)

__all__ = [
    "NO_ACTIVITY_TEMPLATE",
    "UNKNOWN_REPOSITORY",
    "EventKind",
    "format_event",
    "format_events",
    "parse_kind",
    "payload_view",
]
