"""remote-ivt: run marker-verified commands on remote hosts and keep the evidence."""

from remote_ivt.errors import ErrorKind, ExecutionError, StepFailedError
from remote_ivt.models import CommandResult, CommandSpec, LogFile
from remote_ivt.services import CommandRunner

__version__ = "0.3.0"

__all__ = [
    "CommandResult",
    "CommandRunner",
    "CommandSpec",
    "ErrorKind",
    "ExecutionError",
    "LogFile",
    "StepFailedError",
]
