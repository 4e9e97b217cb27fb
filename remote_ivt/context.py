"""Explicit test context for IVT suites.

Bundles what a test needs (session, evidence store, configuration) and is
passed to suites directly.

Example:
    context = await TestContext.open(Config.from_env(), run_name="commandline")
    try:
        await CommandLineIVT(context).run()
    finally:
        context.close()
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from remote_ivt.config import Config
from remote_ivt.services.connection import open_session
from remote_ivt.services.evidence import FileEvidenceStore
from remote_ivt.services.runner import CommandRunner

if TYPE_CHECKING:
    from remote_ivt.protocols import EvidenceStore, RemoteSession

logger = logging.getLogger(__name__)


@dataclass
class TestContext:
    """Session, evidence store and configuration for one run."""

    __test__ = False  # not a pytest test class

    session: "RemoteSession"
    evidence: "EvidenceStore"
    config: Config
    owns_session: bool = field(default=False, repr=False)

    @classmethod
    async def open(cls, config: Config, run_name: str = "ivt") -> "TestContext":
        """Connect to the configured host and create a per-run evidence store.

        Args:
            config: Run configuration
            run_name: Label for the evidence directory

        Returns:
            Context that owns its session; call ``close()`` when done

        Raises:
            ValueError: If no host is configured
            ConnectionError: If the host cannot be reached
        """
        host = config.get_host()
        evidence = FileEvidenceStore.for_run(config.evidence_root, run_name)
        session = await open_session(
            host,
            known_hosts=config.known_hosts_path,
            strict_host_key_checking=config.strict_host_key_checking,
        )
        logger.info("Obtained command shell to %s", host.name)
        return cls(session=session, evidence=evidence, config=config, owns_session=True)

    def runner(self) -> CommandRunner:
        """Get a command runner that archives into this context's store."""
        return CommandRunner(self.evidence)

    def close(self) -> None:
        """Close the session if this context opened it."""
        if self.owns_session:
            close = getattr(self.session, "close", None)
            if close is not None:
                close()
            self.owns_session = False
