"""Entry point: run the command-line IVT against the configured host."""

import asyncio
import logging
import sys

from remote_ivt.config import Config
from remote_ivt.context import TestContext
from remote_ivt.errors import ExecutionError, StepFailedError
from remote_ivt.services.connection import ConnectionError
from remote_ivt.suites import CommandLineIVT
from remote_ivt.utils.console import ColorfulFormatter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STEP_FAILED = 1
EXIT_HARNESS_ERROR = 2


def configure_logging(level: str = "INFO", use_colors: bool = True) -> None:
    """Attach the colorful formatter to the ``remote_ivt`` logger once.

    Args:
        level: Log level name for the package logger
        use_colors: Whether to use ANSI colors (ignored when stderr is not a TTY)
    """
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("remote_ivt")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    logging.getLogger("asyncssh").setLevel(logging.WARNING)
    logging.getLogger("asyncssh.sftp").setLevel(logging.WARNING)


async def run_suite(config: Config) -> int:
    """Open a context, run the command-line IVT and map the outcome to an exit code."""
    try:
        context = await TestContext.open(config, run_name="commandline")
    except (ConnectionError, ValueError, OSError) as e:
        logger.error("Cannot set up test context: %s", e)
        return EXIT_HARNESS_ERROR

    try:
        await CommandLineIVT(context).run()
    except StepFailedError as e:
        logger.error("%s", e)
        return EXIT_STEP_FAILED
    except (ExecutionError, ValueError, KeyError, OSError) as e:
        logger.error("Harness error: %s", e)
        return EXIT_HARNESS_ERROR
    finally:
        context.close()
        logger.info("Evidence stored: %s", ", ".join(context.evidence.names()) or "none")

    return EXIT_OK


def main() -> int:
    """Run the suite with configuration from the environment."""
    try:
        config = Config.from_env()
    except FileNotFoundError as e:
        configure_logging()
        logger.error("%s", e)
        return EXIT_HARNESS_ERROR

    configure_logging(config.settings.log_level, config.settings.log_colors)
    logger.info("Starting command-line IVT (host=%s)", config.settings.host or "<unset>")
    return asyncio.run(run_suite(config))


if __name__ == "__main__":
    sys.exit(main())
