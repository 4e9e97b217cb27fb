"""SSH host key verification settings."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class HostKeyVerifier:
    """Resolves which known_hosts file asyncssh verifies against."""

    def __init__(
        self,
        known_hosts_path: str | None = None,
        strict_checking: bool = True,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file or 'none' to disable
            strict_checking: Reject unknown host keys

        Raises:
            FileNotFoundError: If strict mode and the file is missing
        """
        self.strict_checking = strict_checking
        self._known_hosts = self._resolve(known_hosts_path)

    def _resolve(self, value: str | None) -> str | None:
        if value and value.lower() == "none":
            logger.critical(
                "SSH host key verification disabled. "
                "Only use this against disposable test hosts."
            )
            return None

        path = (
            Path(os.path.expanduser(value))
            if value
            else Path.home() / ".ssh" / "known_hosts"
        )
        if path.exists():
            return str(path)

        if self.strict_checking:
            raise FileNotFoundError(
                f"SSH host key verification required but known_hosts "
                f"not found at {path}.\n"
                f"Add host keys with: ssh-keyscan <hostname> >> {path}\n"
                f"or set REMOTE_IVT_KNOWN_HOSTS=none (NOT RECOMMENDED)"
            )
        logger.warning(
            "known_hosts not found at %s, verification disabled", path
        )
        return None

    def get_known_hosts_path(self) -> str | None:
        """Get path to known_hosts file, or None if verification is disabled."""
        return self._known_hosts

    def is_enabled(self) -> bool:
        """Check if host key verification is enabled."""
        return self._known_hosts is not None
