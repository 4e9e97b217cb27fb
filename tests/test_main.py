"""Tests for the command-line entry point."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from remote_ivt.__main__ import (
    EXIT_HARNESS_ERROR,
    EXIT_OK,
    EXIT_STEP_FAILED,
    configure_logging,
    main,
    run_suite,
)
from remote_ivt.errors import ErrorKind, ExecutionError, StepFailedError
from remote_ivt.models import CommandResult
from remote_ivt.services.connection import ConnectionError


@pytest.fixture
def context() -> MagicMock:
    ctx = MagicMock()
    ctx.evidence.names.return_value = ["mvn.log"]
    return ctx


class TestRunSuite:
    """Exit code mapping for suite outcomes."""

    @pytest.mark.asyncio
    async def test_success(self, context: MagicMock) -> None:
        with patch("remote_ivt.__main__.TestContext.open", AsyncMock(return_value=context)), \
             patch("remote_ivt.__main__.CommandLineIVT") as suite:
            suite.return_value.run = AsyncMock(return_value=[])
            code = await run_suite(MagicMock())

        assert code == EXIT_OK
        context.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_step_failure(self, context: MagicMock) -> None:
        failure = StepFailedError("core_ivt", CommandResult("c", "voras-boot-rc=1", 1))
        with patch("remote_ivt.__main__.TestContext.open", AsyncMock(return_value=context)), \
             patch("remote_ivt.__main__.CommandLineIVT") as suite:
            suite.return_value.run = AsyncMock(side_effect=failure)
            code = await run_suite(MagicMock())

        assert code == EXIT_STEP_FAILED
        context.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_harness_failure(self, context: MagicMock) -> None:
        error = ExecutionError(ErrorKind.EVIDENCE_COPY_FAILED, "gone", path="mvn.log")
        with patch("remote_ivt.__main__.TestContext.open", AsyncMock(return_value=context)), \
             patch("remote_ivt.__main__.CommandLineIVT") as suite:
            suite.return_value.run = AsyncMock(side_effect=error)
            code = await run_suite(MagicMock())

        assert code == EXIT_HARNESS_ERROR
        context.close.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            PermissionError("Permission denied writing .m2/settings.xml"),
            OSError("Cannot write .m2/settings.xml: Failure"),
            KeyError("vorasrepo"),
        ],
    )
    async def test_setup_failure_is_harness_error(
        self, context: MagicMock, error: Exception
    ) -> None:
        """A failed settings upload or skeleton render is not a step failure."""
        with patch("remote_ivt.__main__.TestContext.open", AsyncMock(return_value=context)), \
             patch("remote_ivt.__main__.CommandLineIVT") as suite:
            suite.return_value.run = AsyncMock(side_effect=error)
            code = await run_suite(MagicMock())

        assert code == EXIT_HARNESS_ERROR
        context.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_connection_failure(self) -> None:
        error = ConnectionError("lab", OSError("refused"))
        with patch("remote_ivt.__main__.TestContext.open", AsyncMock(side_effect=error)):
            code = await run_suite(MagicMock())

        assert code == EXIT_HARNESS_ERROR


def test_main_reports_missing_known_hosts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REMOTE_IVT_KNOWN_HOSTS", str(tmp_path / "missing"))
    monkeypatch.setenv("REMOTE_IVT_STRICT_HOST_KEY_CHECKING", "true")

    with patch("remote_ivt.__main__.configure_logging"):
        assert main() == EXIT_HARNESS_ERROR


def test_main_runs_suite(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REMOTE_IVT_KNOWN_HOSTS", "none")
    monkeypatch.setenv("REMOTE_IVT_HOST", "lab")

    with patch("remote_ivt.__main__.configure_logging"), \
         patch("remote_ivt.__main__.run_suite", AsyncMock(return_value=EXIT_OK)) as run:
        assert main() == EXIT_OK

    config = run.call_args.args[0]
    assert config.settings.host == "lab"


def test_configure_logging_adds_single_handler() -> None:
    package_logger = logging.getLogger("remote_ivt")
    saved = package_logger.handlers[:]
    saved_level = package_logger.level
    package_logger.handlers.clear()
    try:
        configure_logging("debug", use_colors=False)
        configure_logging("debug", use_colors=False)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        assert logging.getLogger("asyncssh").level == logging.WARNING
    finally:
        package_logger.handlers[:] = saved
        package_logger.propagate = True
        package_logger.setLevel(saved_level)
