"""Compose fetching and formatting into one testable run.

``run`` maps a username and an events client to the exit code and the lines
destined for each output stream. It performs no I/O of its own beyond the
client call.
"""

from __future__ import annotations

import dataclasses
import typing as typ

from .formatting import format_events
from .github import fetch

if typ.TYPE_CHECKING:
    from .github import UserEventsClient

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


@dataclasses.dataclass(frozen=True, slots=True)
class ActivityReport:
    """Outcome of one invocation, ready to be written out."""

    exit_code: int
    stdout: tuple[str, ...] = ()
    stderr: tuple[str, ...] = ()


def error_line(message: object) -> str:
    """Return the error-stream line for a user-facing failure message."""
    return f"Error: {message}"


def run(username: str, *, client: UserEventsClient) -> ActivityReport:
    """Fetch and render activity for ``username``."""
    outcome = fetch(username, client=client)
    if outcome.error is not None:
        return ActivityReport(
            exit_code=EXIT_ERROR,
            stderr=(error_line(outcome.error),),
        )
    lines = format_events(outcome.events, username.strip())
    return ActivityReport(exit_code=EXIT_OK, stdout=tuple(lines))
