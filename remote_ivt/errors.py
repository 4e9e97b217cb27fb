"""Harness and suite exceptions.

Two harness failure kinds are kept apart from command failure:

- ``SESSION_UNAVAILABLE``: the remote session rejected or dropped the command
- ``EVIDENCE_COPY_FAILED``: a log file could not be archived after the command

A remote command that exits non-zero is not an error here. It is reported as
``CommandResult.succeeded == False`` and suites decide what to do with it.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from remote_ivt.models import CommandResult


class ErrorKind(Enum):
    """Kind of harness failure."""

    SESSION_UNAVAILABLE = "session_unavailable"
    EVIDENCE_COPY_FAILED = "evidence_copy_failed"


class ExecutionError(Exception):
    """The harness failed while running a command or archiving its logs."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        path: str | None = None,
        original_error: BaseException | None = None,
        result: "CommandResult | None" = None,
        copied_logs: tuple[str, ...] = (),
    ):
        """Initialize execution error.

        Args:
            kind: Which harness stage failed
            message: Human readable description
            path: Remote path involved in an evidence copy failure
            original_error: Underlying exception
            result: Command result built before the failure, if any
            copied_logs: Evidence names written before the failure
        """
        self.kind = kind
        self.path = path
        self.original_error = original_error
        self.result = result
        self.copied_logs = copied_logs
        super().__init__(message)


class StepFailedError(Exception):
    """A suite step's remote command did not report exit status 0."""

    def __init__(self, step: str, result: "CommandResult"):
        self.step = step
        self.result = result
        if result.exit_marker_value is None:
            detail = "no exit marker in output"
        else:
            detail = f"exit status {result.exit_marker_value}"
        super().__init__(f"Step {step} failed: {detail}")
