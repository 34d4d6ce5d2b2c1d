"""GitHub events client, taxonomy errors and activity models."""

from __future__ import annotations

from .client import GitHubEventsClient, UserEventsClient, fetch, validate_username
from .config import EventsClientConfig
from .decoding import coerce_event, decode_events
from .errors import (
    ActivityConfigError,
    ActivityError,
    GitHubAPIError,
    InvalidInputError,
    NetworkError,
    RateLimitedError,
    ResponseParseError,
    UserNotFoundError,
)
from .models import UNKNOWN_KIND, ActivityEvent, FetchOutcome

__all__ = [
    "UNKNOWN_KIND",
    "ActivityConfigError",
    "ActivityError",
    "ActivityEvent",
    "EventsClientConfig",
    "FetchOutcome",
    "GitHubAPIError",
    "GitHubEventsClient",
    "InvalidInputError",
    "NetworkError",
    "RateLimitedError",
    "ResponseParseError",
    "UserEventsClient",
    "UserNotFoundError",
    "coerce_event",
    "decode_events",
    "fetch",
    "validate_username",
]
