"""Event kinds with dedicated renderings."""

from __future__ import annotations

import enum


class EventKind(enum.StrEnum):
    """Feed ``type`` tags rendered with kind-specific sentences."""

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    RELEASE = "ReleaseEvent"
    PUBLIC = "PublicEvent"
    MEMBER = "MemberEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"


def parse_kind(tag: str) -> EventKind | None:
    """Return the matching kind, or ``None`` for tags without a rendering.

    Examples
    --------
    >>> parse_kind("PushEvent")
    <EventKind.PUSH: 'PushEvent'>
    >>> parse_kind("GollumEvent") is None
    True

    """
    try:
        return EventKind(tag)
    except ValueError:
        return None
