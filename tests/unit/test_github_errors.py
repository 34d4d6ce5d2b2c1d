"""Unit tests for activity error factories."""

from __future__ import annotations

import datetime as dt

from ghactivity.github.errors import (
    ActivityConfigError,
    ActivityError,
    GitHubAPIError,
    InvalidInputError,
    NetworkError,
    RateLimitedError,
    ResponseParseError,
    UserNotFoundError,
)


def test_all_errors_share_the_base_class() -> None:
    """Every taxonomy error is catchable as ActivityError."""
    errors = [
        InvalidInputError.empty_username(),
        UserNotFoundError.for_username("ghost"),
        RateLimitedError.from_response(403),
        GitHubAPIError.http_error(500),
        NetworkError.timeout(10.0),
        ResponseParseError.invalid_body("{}"),
        ActivityConfigError.invalid_timeout("x"),
    ]
    assert all(isinstance(error, ActivityError) for error in errors)


class TestRateLimitedError:
    """Tests for rate-limit messages."""

    def test_plain_message(self) -> None:
        """Without hints the message is the fixed rate-limit text."""
        error = RateLimitedError.from_response(403)
        assert str(error) == (
            "GitHub API rate limit exceeded. Please try again later."
        )

    def test_reset_time_is_shown(self) -> None:
        """A known reset time is included in UTC."""
        reset_at = dt.datetime(2024, 5, 1, 13, 30, tzinfo=dt.UTC)
        error = RateLimitedError.from_response(403, reset_at=reset_at)
        assert "2024-05-01 13:30:00 UTC" in str(error)

    def test_retry_after_is_shown(self) -> None:
        """Retry-after seconds are shown when no reset time is known."""
        error = RateLimitedError.from_response(429, retry_after=30)
        assert error.status_code == 429
        assert "30s" in str(error)


def test_invalid_body_truncates_long_content() -> None:
    """Long bodies are truncated in the message."""
    error = ResponseParseError.invalid_body("x" * 500)
    assert len(str(error)) < 200
    assert str(error).endswith("...")


def test_malformed_username_names_the_input() -> None:
    """The rejected username appears in the message."""
    assert "octo/cat" in str(InvalidInputError.malformed_username("octo/cat"))


def test_network_connection_detail() -> None:
    """Connection failures include the transport detail."""
    assert "refused" in str(NetworkError.connection("refused"))


def test_user_not_found_for_username() -> None:
    """The factory sets the message and keeps the username."""
    error = UserNotFoundError.for_username("ghost")
    assert str(error) == "User 'ghost' not found"
    assert error.username == "ghost"
