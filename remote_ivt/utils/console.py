"""Colorful console logging formatter for IVT runs."""

import logging
import re
from datetime import datetime

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

COMPONENT_COLORS = {
    "remote_ivt.services.runner": COLORS["bright_blue"],
    "remote_ivt.services": COLORS["bright_magenta"],
    "remote_ivt.suites": COLORS["cyan"],
    "remote_ivt.config": COLORS["green"],
    "default": COLORS["white"],
}

# "maven-rc=0" style tokens written by the marker fragment
MARKER_PATTERN = re.compile(r"\b([\w.-]+-?rc)=(-?\d+)\b")
DURATION_PATTERN = re.compile(r"(\d+\.?\d*(?:ms|s)\b)")
SSH_PATTERN = re.compile(r"(\w+@[\w.\-]+(?::\d+)?)")


class ColorfulFormatter(logging.Formatter):
    """Log formatter with level colors and marker highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created).astimezone()
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d}"

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("remote_ivt."):
            name = name[len("remote_ivt."):]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<18}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format as ``time | LEVEL | component | message``."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._colorize(
            f"{record.levelname:<8}",
            LEVEL_COLORS.get(record.levelname, COLORS["white"]),
        )
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self.highlight(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def highlight(self, message: str) -> str:
        """Highlight exit markers, durations and ssh targets in a message."""
        if not self.use_colors:
            return message

        def _marker(match: re.Match[str]) -> str:
            color = COLORS["bright_green"] if match.group(2) == "0" else COLORS["bright_red"]
            return f"{color}{match.group(0)}{COLORS['reset']}"

        message = MARKER_PATTERN.sub(_marker, message)
        message = DURATION_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
        )
        message = SSH_PATTERN.sub(f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message)
        return message
