"""Tests for the console log formatter."""

import logging
import sys

from remote_ivt.utils.console import COLORS, ColorfulFormatter


def make_record(name: str, msg: str, *args: object, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_has_all_columns() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    record = make_record("remote_ivt.services.runner", "Command returned %s=%d", "rc", 0)

    line = formatter.format(record)

    assert "| INFO     |" in line
    assert "services.runner" in line
    assert "remote_ivt.services.runner" not in line
    assert line.endswith("Command returned rc=0")
    assert "\033[" not in line


def test_success_marker_highlighted_green() -> None:
    formatter = ColorfulFormatter(use_colors=True)

    message = formatter.highlight("Command returned maven-rc=0 after 1.2s")

    assert f"{COLORS['bright_green']}maven-rc=0{COLORS['reset']}" in message


def test_failure_marker_highlighted_red() -> None:
    formatter = ColorfulFormatter(use_colors=True)

    message = formatter.highlight("Command returned zip-rc=9")

    assert f"{COLORS['bright_red']}zip-rc=9{COLORS['reset']}" in message


def test_highlight_is_noop_without_colors() -> None:
    formatter = ColorfulFormatter(use_colors=False)

    assert formatter.highlight("rc=0 after 3.0s") == "rc=0 after 3.0s"


def test_exception_info_is_appended() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "remote_ivt", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )

    line = formatter.format(record)

    assert "RuntimeError: boom" in line
