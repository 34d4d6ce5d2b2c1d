"""Structural decoding of the events feed.

Decoding is permissive at the record level: the body must be a JSON array of
objects, but each object is converted on its own and a record that lacks an
event type or repository name becomes an ``Unknown`` event instead of failing
the batch. Optional fields that do not parse are dropped individually.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

from ghactivity.logging import get_logger, log_debug

from .errors import ResponseParseError
from .models import ActivityEvent, RawActor, RawEvent

logger = get_logger(__name__)

_T = typ.TypeVar("_T")

_FeedBody = list[dict[str, typ.Any]]


def _convert_or_none(value: object, target: type[_T]) -> _T | None:
    """Convert an optional field, or return ``None`` when it does not fit."""
    if value is None:
        return None
    try:
        return msgspec.convert(value, type=target, strict=False)
    except msgspec.ValidationError:
        return None


def _repository_name(record: dict[str, typ.Any]) -> str | None:
    """Best-effort repository name lookup on a record that failed conversion."""
    repo = record.get("repo")
    if not isinstance(repo, dict):
        return None
    name = repo.get("name")
    return name if isinstance(name, str) and name else None


def coerce_event(record: dict[str, typ.Any]) -> ActivityEvent:
    """Convert one raw feed record into an :class:`ActivityEvent`.

    Records whose ``type`` or ``repo`` cannot be converted, or that lack
    either, yield an ``Unknown`` event carrying whatever repository name could
    be recovered.
    """
    try:
        raw = msgspec.convert(record, type=RawEvent, strict=False)
    except msgspec.ValidationError as exc:
        log_debug(logger, "Coercing unconvertible event record: %s", exc)
        return ActivityEvent.unknown(_repository_name(record))

    repository_name = raw.repo.name if raw.repo is not None else None
    if not raw.type or not repository_name:
        log_debug(
            logger,
            "Coercing event record missing type or repo (id=%s)",
            raw.id,
        )
        return ActivityEvent.unknown(repository_name or None)

    event_id = _convert_or_none(raw.id, str | int)
    actor = _convert_or_none(raw.actor, RawActor)
    return ActivityEvent(
        kind=raw.type,
        repository_name=repository_name,
        payload=raw.payload if isinstance(raw.payload, dict) else {},
        event_id=str(event_id) if event_id is not None else None,
        actor_login=actor.login if actor is not None else None,
        created_at=_convert_or_none(raw.created_at, dt.datetime),
    )


def decode_events(body: bytes) -> tuple[ActivityEvent, ...]:
    """Decode a response body into events, preserving feed order.

    Raises
    ------
    ResponseParseError
        If the body is not valid JSON or is not an array of objects.

    """
    try:
        records = msgspec.json.decode(body, type=_FeedBody)
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise ResponseParseError.invalid_body(
            body.decode("utf-8", errors="replace")
        ) from exc
    return tuple(coerce_event(record) for record in records)
