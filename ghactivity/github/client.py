"""GitHub REST client for a user's public events feed."""

from __future__ import annotations

import datetime as dt
import http
import re
import typing as typ

import httpx

from ghactivity.logging import get_logger, log_debug, log_info

from .config import EventsClientConfig
from .decoding import decode_events
from .errors import (
    ActivityError,
    GitHubAPIError,
    InvalidInputError,
    NetworkError,
    RateLimitedError,
    UserNotFoundError,
)
from .models import ActivityEvent, FetchOutcome

logger = get_logger(__name__)

# GitHub logins: alphanumeric runs joined by single hyphens, at most 39 chars.
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*$")
_MAX_USERNAME_LENGTH = 39

_RATE_LIMIT_STATUSES = frozenset(
    {http.HTTPStatus.FORBIDDEN, http.HTTPStatus.TOO_MANY_REQUESTS}
)


class UserEventsClient(typ.Protocol):
    """Interface for fetching a user's recent public events."""

    def fetch_user_events(self, username: str) -> tuple[ActivityEvent, ...]:
        """Return the user's events in feed order or raise an ActivityError."""
        ...


def validate_username(username: str) -> str:
    """Return the stripped username, rejecting blank or malformed input.

    Raises
    ------
    InvalidInputError
        If ``username`` is empty or cannot be a GitHub login.

    """
    candidate = username.strip()
    if not candidate:
        raise InvalidInputError.empty_username()
    if (
        len(candidate) > _MAX_USERNAME_LENGTH
        or not _USERNAME_PATTERN.fullmatch(candidate)
    ):
        raise InvalidInputError.malformed_username(candidate)
    return candidate


def _to_int_or_none(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _rate_limit_error(response: httpx.Response) -> RateLimitedError:
    reset_epoch = _to_int_or_none(response.headers.get("x-ratelimit-reset"))
    reset_at = (
        dt.datetime.fromtimestamp(reset_epoch, dt.UTC)
        if reset_epoch is not None
        else None
    )
    return RateLimitedError.from_response(
        response.status_code,
        reset_at=reset_at,
        retry_after=_to_int_or_none(response.headers.get("retry-after")),
    )


def classify_response(response: httpx.Response, username: str) -> None:
    """Raise the taxonomy error matching a non-successful response.

    Returns ``None`` for successful responses.
    """
    status = response.status_code
    if status == http.HTTPStatus.NOT_FOUND:
        raise UserNotFoundError.for_username(username)
    if status in _RATE_LIMIT_STATUSES:
        raise _rate_limit_error(response)
    if not response.is_success:
        raise GitHubAPIError.http_error(status)


class GitHubEventsClient:
    """GitHub REST implementation of :class:`UserEventsClient`."""

    def __init__(
        self,
        config: EventsClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client, creating an HTTP client unless one is given."""
        self._config = config or EventsClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self._config.timeout_s,
            follow_redirects=True,
        )

    @property
    def config(self) -> EventsClientConfig:
        """Return the client configuration."""
        return self._config

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubEventsClient:
        """Return the client for use as a context manager."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close owned resources on context exit."""
        self.close()

    def _send_request(self, url: str) -> httpx.Response:
        """Issue the GET request, mapping transport failures to NetworkError."""
        try:
            return self._client.get(
                url,
                headers={
                    "User-Agent": self._config.user_agent,
                    "Accept": "application/vnd.github+json",
                },
                timeout=self._config.timeout_s,
            )
        except httpx.TimeoutException as exc:
            raise NetworkError.timeout(self._config.timeout_s) from exc
        except httpx.RequestError as exc:
            raise NetworkError.connection(str(exc) or type(exc).__name__) from exc

    def fetch_user_events(self, username: str) -> tuple[ActivityEvent, ...]:
        """Fetch the most recent page of public events for ``username``.

        Raises
        ------
        InvalidInputError
            Before any request, if the username is blank or malformed.
        UserNotFoundError, RateLimitedError, GitHubAPIError
            For 404, 403/429, and other error statuses respectively.
        NetworkError
            On connection failure or timeout.
        ResponseParseError
            If a successful response is not a JSON array of objects.

        """
        login = validate_username(username)
        url = self._config.events_url(login)
        log_debug(logger, "Requesting %s", url)

        response = self._send_request(url)
        classify_response(response, login)

        events = decode_events(response.content)
        log_info(logger, "Fetched %d events for %s", len(events), login)
        return events


def fetch(username: str, *, client: UserEventsClient) -> FetchOutcome:
    """Fetch events for ``username`` and capture any classified error.

    Only :class:`ActivityError` is captured; anything else propagates.
    """
    try:
        login = validate_username(username)
        events = client.fetch_user_events(login)
    except ActivityError as exc:
        log_info(logger, "Fetch failed for %r: %s", username, exc)
        return FetchOutcome.failure(exc)
    return FetchOutcome.success(events)
