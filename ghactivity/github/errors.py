"""Errors raised while fetching GitHub user activity.

Every error is terminal for the current invocation and carries one fixed,
user-facing message. The CLI prints ``str(error)`` on the error stream.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt

_CONTENT_PREVIEW_LIMIT = 100


class ActivityError(RuntimeError):
    """Base exception for all activity fetch failures."""


class InvalidInputError(ActivityError):
    """Raised when the username is rejected before any network call."""

    @classmethod
    def empty_username(cls) -> InvalidInputError:
        """Return an error for a blank username."""
        return cls("A GitHub username is required")

    @classmethod
    def malformed_username(cls, username: str) -> InvalidInputError:
        """Return an error for a username GitHub would never accept."""
        return cls(f"'{username}' is not a valid GitHub username")


class UserNotFoundError(ActivityError):
    """Raised when GitHub reports the user does not exist (HTTP 404)."""

    def __init__(self, message: str, *, username: str) -> None:
        """Initialise with a message and the username that was not found."""
        super().__init__(message)
        self.username = username

    @classmethod
    def for_username(cls, username: str) -> UserNotFoundError:
        """Create an error for a login GitHub does not know."""
        return cls(f"User '{username}' not found", username=username)


class RateLimitedError(ActivityError):
    """Raised when GitHub refuses the request because of rate limiting.

    Attributes
    ----------
    status_code
        HTTP status code of the refusal (403 or 429).
    reset_at
        When the rate-limit window resets, from ``x-ratelimit-reset``.
    retry_after
        Seconds to wait, from ``retry-after``.

    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reset_at: dt.datetime | None = None,
        retry_after: int | None = None,
    ) -> None:
        """Initialise the error with its message and rate-limit hints."""
        self.status_code = status_code
        self.reset_at = reset_at
        self.retry_after = retry_after
        super().__init__(message)

    @classmethod
    def from_response(
        cls,
        status_code: int,
        *,
        reset_at: dt.datetime | None = None,
        retry_after: int | None = None,
    ) -> RateLimitedError:
        """Return an error describing a rate-limited response."""
        msg = "GitHub API rate limit exceeded. Please try again later."
        if reset_at is not None:
            msg = f"{msg} The limit resets at {reset_at:%Y-%m-%d %H:%M:%S} UTC."
        elif retry_after is not None:
            msg = f"{msg} Retry after {retry_after}s."
        return cls(
            msg,
            status_code=status_code,
            reset_at=reset_at,
            retry_after=retry_after,
        )


class GitHubAPIError(ActivityError):
    """Raised when GitHub returns any other error response."""

    def __init__(self, message: str, *, status_code: int) -> None:
        """Initialise with a message and the HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses."""
        return cls(
            f"GitHub API request failed with status {status_code}",
            status_code=status_code,
        )


class NetworkError(ActivityError):
    """Raised when the request could not complete (connection or timeout)."""

    @classmethod
    def timeout(cls, timeout_s: float) -> NetworkError:
        """Return an error for a request that exceeded its timeout."""
        return cls(f"GitHub API request timed out after {timeout_s:g}s")

    @classmethod
    def connection(cls, detail: str) -> NetworkError:
        """Return an error for DNS, connection, or TLS failures."""
        return cls(f"Could not reach the GitHub API: {detail}")


class ResponseParseError(ActivityError):
    """Raised when a 200 response body is not a JSON array of objects."""

    @classmethod
    def invalid_body(cls, content: str) -> ResponseParseError:
        """Return an error carrying a preview of the unparseable body."""
        if len(content) > _CONTENT_PREVIEW_LIMIT:
            preview = content[:_CONTENT_PREVIEW_LIMIT] + "..."
        else:
            preview = content
        return cls(f"Unexpected response from the GitHub API: {preview}")


class ActivityConfigError(ActivityError):
    """Raised when environment configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, raw: str) -> ActivityConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(f"GHACTIVITY_TIMEOUT_S must be a positive number, got {raw!r}")

    @classmethod
    def empty_value(cls, name: str) -> ActivityConfigError:
        """Return an error for an environment variable set to blank."""
        return cls(f"{name} must be non-empty when set")
