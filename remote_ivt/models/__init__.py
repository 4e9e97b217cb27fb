"""Data models for remote IVT runs."""

from remote_ivt.models.command import CommandResult, CommandSpec, LogFile
from remote_ivt.models.ssh import SSHHost
from remote_ivt.models.suite import StepReport

__all__ = [
    "CommandResult",
    "CommandSpec",
    "LogFile",
    "SSHHost",
    "StepReport",
]
