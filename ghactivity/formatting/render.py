"""Render activity events as display lines.

Each supported kind has one renderer in ``_RENDERERS``; any other kind goes
through :func:`_render_fallback`. Renderers read the payload through its typed
view and substitute neutral placeholders for absent fields.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .kinds import EventKind, parse_kind
from .payloads import (
    ForkPayload,
    IssueCommentPayload,
    IssuesPayload,
    MemberPayload,
    PullRequestPayload,
    PullRequestReviewPayload,
    PushPayload,
    RefPayload,
    ReleasePayload,
    payload_view,
)

if typ.TYPE_CHECKING:
    from ghactivity.github.models import ActivityEvent

UNKNOWN_REPOSITORY = "an unknown repository"
NO_ACTIVITY_TEMPLATE = "No recent activity found for user: {username}"

Renderer = cabc.Callable[["ActivityEvent", str], str]


def _capitalise(word: str) -> str:
    """Upper-case the first letter only, so ``reopened`` becomes ``Reopened``."""
    return word[:1].upper() + word[1:]


def _numbered(noun: str, number: int | None, placeholder: str) -> str:
    return f"{noun} #{number}" if number is not None else placeholder


def _render_push(event: ActivityEvent, repo: str) -> str:
    count = payload_view(event.payload, PushPayload).commit_count
    if count is None:
        commits = "some commits"
    else:
        commits = f"{count} commit" if count == 1 else f"{count} commits"
    return f"Pushed {commits} to {repo}"


def _render_ref_change(verb: str, event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, RefPayload)
    if view.ref_type == "repository":
        return f"{verb} repository {repo}"
    if not view.ref_type:
        return f"{verb} an item in {repo}"
    if not view.ref:
        return f"{verb} {view.ref_type} in {repo}"
    return f"{verb} {view.ref_type} '{view.ref}' in {repo}"


def _render_create(event: ActivityEvent, repo: str) -> str:
    return _render_ref_change("Created", event, repo)


def _render_delete(event: ActivityEvent, repo: str) -> str:
    return _render_ref_change("Deleted", event, repo)


def _render_issues(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, IssuesPayload)
    number = view.issue.number if view.issue else None
    action = _capitalise(view.action or "updated")
    return f"{action} {_numbered('issue', number, 'an issue')} in {repo}"


def _render_pull_request(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, PullRequestPayload)
    action = view.action or "updated"
    if action == "closed" and view.pull_request and view.pull_request.merged:
        action = "merged"
    target = _numbered("pull request", view.pr_number, "a pull request")
    return f"{_capitalise(action)} {target} in {repo}"


def _render_watch(event: ActivityEvent, repo: str) -> str:
    return f"Starred {repo}"


def _render_fork(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, ForkPayload)
    if view.forkee and view.forkee.full_name:
        return f"Forked {repo} to {view.forkee.full_name}"
    return f"Forked {repo}"


def _render_release(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, ReleasePayload)
    release = view.release
    tag = (release.tag_name or release.name) if release else None
    target = f"release {tag}" if tag else "a release"
    return f"{_capitalise(view.action or 'published')} {target} in {repo}"


def _render_public(event: ActivityEvent, repo: str) -> str:
    return f"Made {repo} public"


def _render_member(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, MemberPayload)
    login = view.member.login if view.member else None
    action = _capitalise(view.action or "added")
    preposition = "from" if view.action == "removed" else "to"
    return f"{action} {login or 'a member'} as a collaborator {preposition} {repo}"


def _render_issue_comment(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, IssueCommentPayload)
    issue = view.issue
    number = issue.number if issue else None
    if issue is not None and issue.pull_request is not None:
        target = _numbered("pull request", number, "a pull request")
    else:
        target = _numbered("issue", number, "an issue")
    return f"Commented on {target} in {repo}"


def _render_pull_request_review(event: ActivityEvent, repo: str) -> str:
    view = payload_view(event.payload, PullRequestReviewPayload)
    number = view.pull_request.number if view.pull_request else None
    line = f"Reviewed {_numbered('pull request', number, 'a pull request')} in {repo}"
    state = view.review.state if view.review else None
    if state:
        line = f"{line} ({state.lower().replace('_', ' ')})"
    return line


def _render_fallback(event: ActivityEvent, repo: str) -> str:
    return f"Performed an action ({event.kind}) on {repo}"


_RENDERERS: dict[EventKind, Renderer] = {
    EventKind.PUSH: _render_push,
    EventKind.CREATE: _render_create,
    EventKind.DELETE: _render_delete,
    EventKind.ISSUES: _render_issues,
    EventKind.PULL_REQUEST: _render_pull_request,
    EventKind.WATCH: _render_watch,
    EventKind.FORK: _render_fork,
    EventKind.RELEASE: _render_release,
    EventKind.PUBLIC: _render_public,
    EventKind.MEMBER: _render_member,
    EventKind.ISSUE_COMMENT: _render_issue_comment,
    EventKind.PULL_REQUEST_REVIEW: _render_pull_request_review,
}


def format_event(event: ActivityEvent) -> str:
    """Render a single event as one display line. Never raises for bad data."""
    repo = event.repository_name or UNKNOWN_REPOSITORY
    kind = parse_kind(event.kind)
    renderer = _RENDERERS[kind] if kind is not None else _render_fallback
    return renderer(event, repo)


def format_events(events: cabc.Sequence[ActivityEvent], username: str) -> list[str]:
    """Render events in feed order, one line each.

    An empty sequence yields the single "no activity" line for ``username``.

    Examples
    --------
    >>> format_events([], "octocat")
    ['No recent activity found for user: octocat']

    """
    if not events:
        return [NO_ACTIVITY_TEMPLATE.format(username=username)]
    return [format_event(event) for event in events]
