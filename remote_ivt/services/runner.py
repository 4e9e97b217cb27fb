"""Marker-wrapped remote command execution with evidence archival."""

import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING

from remote_ivt.errors import ErrorKind, ExecutionError
from remote_ivt.models import CommandResult, CommandSpec
from remote_ivt.utils.marker import parse_marker, wrap_command

if TYPE_CHECKING:
    from remote_ivt.protocols import EvidenceStore, RemoteSession

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run one command per call and archive the logs it leaves behind.

    The runner holds no per-call state. The session is borrowed for the
    duration of ``run`` and must not be driven by another caller meanwhile.
    """

    def __init__(self, evidence: "EvidenceStore") -> None:
        """Initialize runner.

        Args:
            evidence: Store that receives copied log files
        """
        self.evidence = evidence

    async def run(self, session: "RemoteSession", spec: CommandSpec) -> CommandResult:
        """Execute ``spec`` on ``session`` and verify its exit marker.

        A missing or non-zero marker is returned as an unsuccessful result,
        never raised.

        Args:
            session: Established remote session
            spec: Command line, marker name and logs to archive

        Returns:
            CommandResult with the raw output, parsed marker and copied logs

        Raises:
            ValueError: If the command line is empty
            ExecutionError: SESSION_UNAVAILABLE if the session rejects the
                command, EVIDENCE_COPY_FAILED if a log cannot be archived
        """
        if not spec.command_line.strip():
            raise ValueError("Command line cannot be empty")

        command = wrap_command(spec.command_line, spec.marker_name)
        logger.info("Issuing command: %s", command)

        start = time.monotonic()
        try:
            raw_output = await session.issue_command(command)
        except ExecutionError:
            raise
        except OSError as e:
            logger.error("Session rejected command %r: %s", command, e)
            raise ExecutionError(
                ErrorKind.SESSION_UNAVAILABLE,
                f"Session unavailable: {e}",
                original_error=e,
            ) from e
        duration = time.monotonic() - start

        exit_value = parse_marker(raw_output, spec.marker_name)
        result = CommandResult(
            command=command,
            raw_output=raw_output,
            exit_marker_value=exit_value,
            duration=duration,
        )

        if exit_value is None:
            logger.warning(
                "Marker %s missing from output after %.1fs", spec.marker_name, duration
            )
        elif exit_value != 0:
            logger.warning(
                "Command returned %s=%d after %.1fs", spec.marker_name, exit_value, duration
            )
        else:
            logger.info(
                "Command returned %s=0 after %.1fs", spec.marker_name, duration
            )

        copied: list[str] = []
        for log_file in spec.log_files:
            try:
                data = await session.fetch_file(log_file.remote_path)
                self.evidence.write(log_file.evidence_name, data)
            except OSError as e:
                logger.error(
                    "Failed to archive %s as %s: %s",
                    log_file.remote_path,
                    log_file.evidence_name,
                    e,
                )
                raise ExecutionError(
                    ErrorKind.EVIDENCE_COPY_FAILED,
                    f"Cannot copy {log_file.remote_path} to evidence: {e}",
                    path=log_file.remote_path,
                    original_error=e,
                    result=result,
                    copied_logs=tuple(copied),
                ) from e
            copied.append(log_file.evidence_name)
            logger.debug("Archived %s as %s", log_file.remote_path, log_file.evidence_name)

        return replace(result, copied_logs=tuple(copied))
