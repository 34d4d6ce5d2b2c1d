"""Behavioural tests for the fetch-and-format flow."""
# ruff: noqa: D103

from __future__ import annotations

import typing as typ

import pytest
from pytest_bdd import given, parsers, scenario, then, when

from ghactivity.pipeline import ActivityReport, run
from tests.helpers.github_events import (
    RecordingTransport,
    feed_record,
    json_responder,
    make_client,
)

if typ.TYPE_CHECKING:
    from ghactivity.github import GitHubEventsClient


class StepContext(typ.TypedDict, total=False):
    """State shared between BDD steps in this module."""

    client: GitHubEventsClient
    transport: RecordingTransport
    report: ActivityReport


@scenario("../github_activity.feature", "Recent pushes are summarised")
def test_push_summary() -> None:
    """Push events render as commit counts."""


@scenario("../github_activity.feature", "A user without public events")
def test_no_activity() -> None:
    """Empty feeds report no activity."""


@scenario("../github_activity.feature", "An unknown user is reported")
def test_unknown_user() -> None:
    """404 responses name the missing user."""


@scenario("../github_activity.feature", "Rate limiting is reported")
def test_rate_limited() -> None:
    """403 responses are reported as rate limiting."""


@scenario("../github_activity.feature", "A blank username never reaches the network")
def test_blank_username() -> None:
    """Blank usernames fail before any request."""


@pytest.fixture
def context() -> StepContext:
    return {}


def _install(context: StepContext, status: int, body: object) -> None:
    client, transport = make_client(json_responder(status, body))
    context["client"] = client
    context["transport"] = transport


@given(
    parsers.parse('the GitHub API returns a push of {count:d} commits to "{repo}"')
)
def given_push_feed(context: StepContext, count: int, repo: str) -> None:
    _install(context, 200, [feed_record("PushEvent", repo, {"size": count})])


@given("the GitHub API returns an empty feed")
def given_empty_feed(context: StepContext) -> None:
    _install(context, 200, [])


@given(parsers.parse("the GitHub API responds with status {status:d}"))
def given_status(context: StepContext, status: int) -> None:
    _install(context, status, {"message": "error"})


@when(parsers.parse('I request activity for "{username}"'))
def when_request(context: StepContext, username: str) -> None:
    context["report"] = run(username, client=context["client"])


@when("I request activity for a blank username")
def when_request_blank(context: StepContext) -> None:
    context["report"] = run("   ", client=context["client"])


@then(parsers.parse('the output is exactly "{line}"'))
def then_output(context: StepContext, line: str) -> None:
    assert context["report"].stdout == (line,)


@then(parsers.parse('the error output contains "{text}"'))
def then_error_output(context: StepContext, text: str) -> None:
    assert any(text in line for line in context["report"].stderr)


@then(parsers.parse("the exit code is {code:d}"))
def then_exit_code(context: StepContext, code: int) -> None:
    assert context["report"].exit_code == code


@then("no HTTP request was made")
def then_no_request(context: StepContext) -> None:
    assert context["transport"].requests == []
