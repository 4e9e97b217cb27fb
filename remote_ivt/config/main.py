"""Run configuration.

Delegates to specialized components:
- Settings: Environment variables
- HostKeyVerifier: known_hosts resolution
"""

import logging
import os
from dataclasses import dataclass

from remote_ivt.config.host_keys import HostKeyVerifier
from remote_ivt.config.settings import Settings
from remote_ivt.models import SSHHost

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Run configuration.

    Aggregates environment settings and host key policy.
    """

    settings: Settings
    host_keys: HostKeyVerifier

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()
        host_keys = HostKeyVerifier(
            known_hosts_path=os.getenv("REMOTE_IVT_KNOWN_HOSTS"),
            strict_checking=cls._get_bool_env("REMOTE_IVT_STRICT_HOST_KEY_CHECKING", True),
        )
        return cls(settings=settings, host_keys=host_keys)

    @staticmethod
    def _get_bool_env(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() != "false"

    def get_host(self) -> SSHHost:
        """Get the SSH host the run targets.

        Raises:
            ValueError: If no host is configured
        """
        if not self.settings.host:
            raise ValueError("No target host configured, set REMOTE_IVT_HOST")
        return SSHHost(
            name=self.settings.host,
            hostname=self.settings.host,
            user=self.settings.user,
            port=self.settings.port,
            identity_file=self.settings.identity_file,
        )

    @property
    def evidence_root(self) -> str:
        """Directory that collects evidence of all runs."""
        return self.settings.evidence_root

    @property
    def maven_repository(self) -> str:
        """Maven repository holding the runtime under test."""
        return self.settings.maven_repository

    @property
    def runtime_version(self) -> str:
        """Version of the runtime and IVT obrs."""
        return self.settings.runtime_version

    @property
    def known_hosts_path(self) -> str | None:
        """Path to known_hosts file or None if disabled."""
        return self.host_keys.get_known_hosts_path()

    @property
    def strict_host_key_checking(self) -> bool:
        """Whether to reject unknown host keys."""
        return self.host_keys.strict_checking
