"""Command execution data models."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from remote_ivt.utils.marker import ends_with_operator

MARKER_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass(frozen=True)
class LogFile:
    """A remote log file to archive as evidence after a command runs."""

    remote_path: str
    evidence_name: str


@dataclass(frozen=True)
class CommandSpec:
    """A command line plus the marker that reports its exit status.

    Args:
        command_line: Shell pipeline to run on the remote host
        marker_name: Token echoed as ``<marker_name>=$?`` after the pipeline
        log_files: ``LogFile`` entries or ``(remote_path, evidence_name)`` pairs

    Raises:
        ValueError: If the command line is blank or ends in ``&`` or ``|``,
            or the marker name is not safe to echo unquoted
    """

    command_line: str
    marker_name: str
    log_files: tuple[LogFile, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.command_line or not self.command_line.strip():
            raise ValueError("Command line cannot be empty")
        if ends_with_operator(self.command_line):
            raise ValueError(f"Command line ends in an operator: {self.command_line!r}")
        if not MARKER_NAME_PATTERN.match(self.marker_name):
            raise ValueError(f"Invalid marker name: {self.marker_name!r}")
        object.__setattr__(self, "log_files", _as_log_files(self.log_files))


def _as_log_files(entries: Iterable[LogFile | tuple[str, str]]) -> tuple[LogFile, ...]:
    log_files = []
    for entry in entries:
        if isinstance(entry, LogFile):
            log_files.append(entry)
        else:
            remote_path, evidence_name = entry
            log_files.append(LogFile(remote_path, evidence_name))
    return tuple(log_files)


@dataclass(frozen=True)
class CommandResult:
    """Result of one marker-wrapped remote command."""

    command: str
    raw_output: str
    exit_marker_value: int | None
    copied_logs: tuple[str, ...] = ()
    duration: float = 0.0

    @property
    def succeeded(self) -> bool:
        """True only when the marker was found and reported exit status 0."""
        return self.exit_marker_value == 0
