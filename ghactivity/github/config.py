"""Configuration for the GitHub events client."""

from __future__ import annotations

import dataclasses
import os

from ghactivity import __version__

from .errors import ActivityConfigError

# Default configuration values - single source of truth
_DEFAULT_API_BASE = "https://api.github.com"
_DEFAULT_TIMEOUT_S = 10.0
_DEFAULT_USER_AGENT = f"github-activity/{__version__}"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclasses.dataclass(frozen=True, slots=True)
class EventsClientConfig:
    """Configuration for the GitHub REST events client.

    Attributes
    ----------
    api_base
        Base URL of the GitHub REST API, without a trailing slash.
    timeout_s
        Request timeout in seconds.
    user_agent
        Value of the ``User-Agent`` header; GitHub rejects requests without one.
    log_level
        Log level requested for the CLI.

    """

    api_base: str = _DEFAULT_API_BASE
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT
    log_level: str = _DEFAULT_LOG_LEVEL

    def events_url(self, username: str) -> str:
        """Return the public events URL for ``username``."""
        return f"{self.api_base.rstrip('/')}/users/{username}/events"

    @staticmethod
    def _parse_timeout_from_env() -> float:
        """Parse and validate the timeout from the environment.

        Raises
        ------
        ActivityConfigError
            If the value is not a positive number.

        """
        raw_timeout = os.environ.get("GHACTIVITY_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise ActivityConfigError.invalid_timeout(raw_timeout) from exc

        if timeout_s <= 0:
            raise ActivityConfigError.invalid_timeout(raw_timeout)

        return timeout_s

    @staticmethod
    def _non_empty_from_env(name: str, default: str) -> str:
        raw = os.environ.get(name)
        if raw is None:
            return default
        value = raw.strip()
        if not value:
            raise ActivityConfigError.empty_value(name)
        return value

    @classmethod
    def from_env(cls) -> EventsClientConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GHACTIVITY_API_BASE``: Optional API base URL override
        - ``GHACTIVITY_TIMEOUT_S``: Optional timeout (positive number)
        - ``GHACTIVITY_USER_AGENT``: Optional ``User-Agent`` override
        - ``GHACTIVITY_LOG_LEVEL``: Optional log level for the CLI

        Raises
        ------
        ActivityConfigError
            If a variable is set to an invalid value.

        """
        return cls(
            api_base=cls._non_empty_from_env("GHACTIVITY_API_BASE", _DEFAULT_API_BASE),
            timeout_s=cls._parse_timeout_from_env(),
            user_agent=cls._non_empty_from_env(
                "GHACTIVITY_USER_AGENT", _DEFAULT_USER_AGENT
            ),
            log_level=os.environ.get("GHACTIVITY_LOG_LEVEL", _DEFAULT_LOG_LEVEL),
        )
