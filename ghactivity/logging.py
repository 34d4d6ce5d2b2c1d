"""femtologging setup and percent-style log helpers.

Callers pass a template and arguments; the helpers format the message before
it reaches femtologging, which takes pre-formatted strings. Diagnostics go to
the error stream, never to standard output, which carries activity lines.

Example:
>>> from ghactivity.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Fetched %d events", 30)

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger

DEFAULT_LOG_LEVEL = "WARNING"


class LogLevel(enum.StrEnum):
    """Level names femtologging accepts."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Map a user-supplied level name onto a :class:`LogLevel` value.

    Returns
    -------
    tuple[str, bool]
        The level to use and whether ``level`` had to be replaced by
        :data:`DEFAULT_LOG_LEVEL` because it was blank or unrecognised.

    """
    if not level:
        return (DEFAULT_LOG_LEVEL, True)

    normalized = level.strip().upper()
    if normalized in LogLevel.__members__:
        return (normalized, False)

    return (DEFAULT_LOG_LEVEL, True)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Install the root femtologging handler at ``level``.

    ``force`` replaces a previously installed handler, which the CLI needs
    because it may be invoked more than once in one process. Returns the
    result of :func:`normalize_log_level` so callers can warn about a bad
    level once logging is live.
    """
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


def format_log_message(template: str, *args: object) -> str:
    """Apply percent-style interpolation to ``template``."""
    return template % args


class _SupportsLog(typ.Protocol):
    """The slice of the femtologging logger API these helpers call."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(logger: _SupportsLog, level: str, template: str, args: tuple) -> None:
    logger.log(level, format_log_message(template, *args), stack_info=False)


def log_debug(logger: _SupportsLog, template: str, *args: object) -> None:
    """Emit a DEBUG record."""
    _emit(logger, "DEBUG", template, args)


def log_info(logger: _SupportsLog, template: str, *args: object) -> None:
    """Emit an INFO record, such as a fetch summary."""
    _emit(logger, "INFO", template, args)


def log_warning(logger: _SupportsLog, template: str, *args: object) -> None:
    """Emit a WARNING record for a problem the run recovers from."""
    _emit(logger, "WARNING", template, args)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LogLevel",
    "configure_logging",
    "format_log_message",
    "get_logger",
    "log_debug",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
