"""Typed domain models for GitHub user activity."""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import datetime as dt

    from .errors import ActivityError

UNKNOWN_KIND = "Unknown"


class RawActor(msgspec.Struct, kw_only=True):
    """Actor block of a raw feed record."""

    login: str | None = None


class RawRepo(msgspec.Struct, kw_only=True):
    """Repository block of a raw feed record."""

    name: str | None = None


class RawEvent(msgspec.Struct, kw_only=True):
    """Permissive shape of one record in the events feed.

    Only ``type`` and ``repo`` are checked when the record converts. The
    remaining fields are left untyped and parsed one at a time, so a bad
    timestamp or actor never costs the record its kind. Unknown fields are
    ignored.
    """

    type: str | None = None
    repo: RawRepo | None = None
    payload: typ.Any = None
    id: typ.Any = None
    actor: typ.Any = None
    created_at: typ.Any = None


@dataclasses.dataclass(frozen=True, slots=True)
class ActivityEvent:
    """One user action surfaced by the activity feed.

    Attributes
    ----------
    kind
        Event type tag such as ``PushEvent``. Open-ended; unrecognised values
        are rendered with a generic line.
    repository_name
        Repository in ``owner/name`` form, when the feed supplied one.
    payload
        Kind-dependent data, left loosely typed until rendering.

    """

    kind: str
    repository_name: str | None
    payload: dict[str, typ.Any] = dataclasses.field(default_factory=dict)
    event_id: str | None = None
    actor_login: str | None = None
    created_at: dt.datetime | None = None

    @classmethod
    def unknown(cls, repository_name: str | None = None) -> ActivityEvent:
        """Return the minimal event used for records missing required fields."""
        return cls(kind=UNKNOWN_KIND, repository_name=repository_name)


@dataclasses.dataclass(frozen=True, slots=True)
class FetchOutcome:
    """Result of one fetch attempt: events on success, otherwise an error."""

    events: tuple[ActivityEvent, ...] = ()
    error: ActivityError | None = None

    @property
    def ok(self) -> bool:
        """Return whether the fetch succeeded."""
        return self.error is None

    @classmethod
    def success(cls, events: typ.Iterable[ActivityEvent]) -> FetchOutcome:
        """Wrap a successfully fetched sequence of events."""
        return cls(events=tuple(events))

    @classmethod
    def failure(cls, error: ActivityError) -> FetchOutcome:
        """Wrap a classified fetch error."""
        return cls(error=error)
