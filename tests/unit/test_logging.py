"""Unit tests for femtologging integration helpers.

Run with:
    pytest tests/unit/test_logging.py
"""

from __future__ import annotations

import pytest

from ghactivity.logging import (
    configure_logging,
    format_log_message,
    log_debug,
    log_info,
    log_warning,
    normalize_log_level,
)
from tests.helpers.github_events import FakeLogger


@pytest.mark.parametrize(
    ("input_level", "expected_level", "expected_invalid"),
    [
        ("warning", "WARNING", False),
        (" debug ", "DEBUG", False),
        ("WARN", "WARN", False),
        (None, "WARNING", True),
        ("", "WARNING", True),
        ("nope", "WARNING", True),
    ],
)
def test_normalize_log_level(
    input_level: str | None,
    expected_level: str,
    *,
    expected_invalid: bool,
) -> None:
    """Normalize log levels and flag invalid inputs."""
    level, invalid = normalize_log_level(input_level)
    assert level == expected_level, (
        f"Expected {input_level!r} to normalize to {expected_level}."
    )
    assert invalid is expected_invalid, (
        f"Expected invalid flag to be {expected_invalid} for {input_level!r}."
    )


def test_format_log_message_uses_percent_formatting() -> None:
    """Percent formatting produces the expected message."""
    message = format_log_message("fetched %d events for %s", 3, "octocat")
    assert message == "fetched 3 events for octocat"


@pytest.mark.parametrize(
    ("helper", "level"),
    [
        (log_debug, "DEBUG"),
        (log_info, "INFO"),
        (log_warning, "WARNING"),
    ],
)
def test_level_helpers_format_and_pass_level(helper: object, level: str) -> None:
    """Each helper formats its template and emits the matching level."""
    logger = FakeLogger()

    helper(logger, "hello %s", "world")  # type: ignore[operator]

    assert logger.calls == [(level, "hello world", None, False)], (
        f"Expected {level} log entry with formatted message."
    )


def test_helpers_leave_literal_percent_without_args() -> None:
    """A template with no arguments and an escaped percent is emitted as is."""
    logger = FakeLogger()

    log_info(logger, "100%% of events decoded")

    assert logger.messages("INFO") == ["100% of events decoded"]


@pytest.mark.parametrize(
    ("input_level", "expected_normalized", "expected_invalid"),
    [
        ("DEBUG", "DEBUG", False),
        ("nope", "WARNING", True),
    ],
)
def test_configure_logging(
    monkeypatch: pytest.MonkeyPatch,
    input_level: str,
    expected_normalized: str,
    *,
    expected_invalid: bool,
) -> None:
    """configure_logging normalizes input levels and flags invalid values."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("ghactivity.logging.basicConfig", fake_basic_config)

    normalized, invalid = configure_logging(input_level)

    assert normalized == expected_normalized
    assert invalid is expected_invalid
    assert captured.get("level") == expected_normalized
    assert captured.get("force") is False, "Expected basicConfig to keep handlers."
