"""Typed views over kind-specific event payloads.

Every field is optional. Rendering converts an event's payload dict into the
view for its kind and supplies placeholder text for anything absent, so a
missing or mistyped field never fails the line.
"""

from __future__ import annotations

import typing as typ

import msgspec

_ViewT = typ.TypeVar("_ViewT", bound=msgspec.Struct)


class IssueRef(msgspec.Struct, kw_only=True):
    """Issue reference; ``pull_request`` is present when the issue is a PR."""

    number: int | None = None
    pull_request: dict[str, typ.Any] | None = None


class PullRequestRef(msgspec.Struct, kw_only=True):
    """Pull request reference."""

    number: int | None = None
    merged: bool | None = None


class ReleaseRef(msgspec.Struct, kw_only=True):
    """Release reference."""

    tag_name: str | None = None
    name: str | None = None


class MemberRef(msgspec.Struct, kw_only=True):
    """Collaborator reference."""

    login: str | None = None


class ForkeeRef(msgspec.Struct, kw_only=True):
    """Repository created by a fork."""

    full_name: str | None = None


class ReviewRef(msgspec.Struct, kw_only=True):
    """Pull request review reference."""

    state: str | None = None


class PushPayload(msgspec.Struct, kw_only=True):
    """Payload of ``PushEvent``."""

    size: int | None = None
    distinct_size: int | None = None
    commits: list[typ.Any] | None = None

    @property
    def commit_count(self) -> int | None:
        """Return the number of pushed commits, if the payload says."""
        if self.size is not None:
            return self.size
        if self.distinct_size is not None:
            return self.distinct_size
        if self.commits is not None:
            return len(self.commits)
        return None


class RefPayload(msgspec.Struct, kw_only=True):
    """Payload of ``CreateEvent`` and ``DeleteEvent``."""

    ref: str | None = None
    ref_type: str | None = None


class IssuesPayload(msgspec.Struct, kw_only=True):
    """Payload of ``IssuesEvent``."""

    action: str | None = None
    issue: IssueRef | None = None


class PullRequestPayload(msgspec.Struct, kw_only=True):
    """Payload of ``PullRequestEvent``."""

    action: str | None = None
    number: int | None = None
    pull_request: PullRequestRef | None = None

    @property
    def pr_number(self) -> int | None:
        """Return the PR number from the payload or its pull request block."""
        if self.number is not None:
            return self.number
        return self.pull_request.number if self.pull_request else None


class ForkPayload(msgspec.Struct, kw_only=True):
    """Payload of ``ForkEvent``."""

    forkee: ForkeeRef | None = None


class ReleasePayload(msgspec.Struct, kw_only=True):
    """Payload of ``ReleaseEvent``."""

    action: str | None = None
    release: ReleaseRef | None = None


class MemberPayload(msgspec.Struct, kw_only=True):
    """Payload of ``MemberEvent``."""

    action: str | None = None
    member: MemberRef | None = None


class IssueCommentPayload(msgspec.Struct, kw_only=True):
    """Payload of ``IssueCommentEvent``."""

    action: str | None = None
    issue: IssueRef | None = None


class PullRequestReviewPayload(msgspec.Struct, kw_only=True):
    """Payload of ``PullRequestReviewEvent``."""

    action: str | None = None
    review: ReviewRef | None = None
    pull_request: PullRequestRef | None = None


def _nested_view(value: object, annotation: object) -> msgspec.Struct | None:
    """Return a partial view for a mistyped nested object, if it is one."""
    if not isinstance(value, dict):
        return None
    for arg in typ.get_args(annotation):
        if isinstance(arg, type) and issubclass(arg, msgspec.Struct):
            return payload_view(value, arg)
    return None


def payload_view(payload: dict[str, typ.Any], view: type[_ViewT]) -> _ViewT:
    """Convert ``payload`` into ``view`` one field at a time.

    A field that does not convert keeps its default while its siblings are
    still read. Nested objects are treated the same way, so a bad
    ``issue.number`` leaves ``action`` intact.

    Examples
    --------
    >>> payload_view({"size": "3"}, PushPayload).commit_count
    3
    >>> payload_view({"size": [1]}, PushPayload).commit_count is None
    True
    >>> payload_view({"action": "closed", "issue": "?"}, IssuesPayload).action
    'closed'

    """
    values: dict[str, typ.Any] = {}
    for field in msgspec.structs.fields(view):
        if field.encode_name not in payload:
            continue
        value = payload[field.encode_name]
        try:
            values[field.name] = msgspec.convert(value, type=field.type, strict=False)
        except msgspec.ValidationError:
            nested = _nested_view(value, field.type)
            if nested is not None:
                values[field.name] = nested
    return view(**values)
