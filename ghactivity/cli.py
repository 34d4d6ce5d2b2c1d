"""Command-line entry point: print a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import dataclasses
import sys
import typing as typ

from . import __version__
from .github import ActivityConfigError, EventsClientConfig, GitHubEventsClient
from .logging import configure_logging, get_logger, log_warning
from .pipeline import EXIT_ERROR, EXIT_INTERRUPTED, error_line, run

if typ.TYPE_CHECKING:
    from .github import UserEventsClient

logger = get_logger(__name__)


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"expected a number of seconds, got {raw!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if value <= 0:
        msg = f"timeout must be positive, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``github-activity``."""
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Fetch a GitHub user's recent public activity.",
    )
    parser.add_argument("username", help="GitHub username to fetch activity for")
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        metavar="SECONDS",
        help="Request timeout in seconds (default: GHACTIVITY_TIMEOUT_S or 10)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Diagnostic log level (default: GHACTIVITY_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    client: UserEventsClient | None = None,
) -> int:
    """Print recent activity for a username and return the exit code.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    client : UserEventsClient | None, optional
        Events client to use instead of a network-backed one.

    Returns
    -------
    int
        0 on success (including no activity), 1 on any fetch or
        configuration error, 130 when interrupted. Usage errors exit 2
        through argparse.

    """
    args = build_parser().parse_args(argv)

    try:
        config = EventsClientConfig.from_env()
    except ActivityConfigError as exc:
        print(error_line(exc), file=sys.stderr)
        return EXIT_ERROR

    level, invalid = configure_logging(
        args.log_level or config.log_level, force=True
    )
    if invalid:
        log_warning(logger, "Unknown log level; using %s", level)

    if args.timeout is not None:
        config = dataclasses.replace(config, timeout_s=args.timeout)

    try:
        if client is not None:
            report = run(args.username, client=client)
        else:
            with GitHubEventsClient(config) as events_client:
                report = run(args.username, client=events_client)
    except KeyboardInterrupt:
        print(error_line("interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED

    for line in report.stdout:
        print(line)
    for line in report.stderr:
        print(line, file=sys.stderr)
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
