"""SSH session acquisition with automatic retry."""

import logging
from typing import Any

import asyncssh

from remote_ivt.models import SSHHost
from remote_ivt.services.session import SSHSession

logger = logging.getLogger(__name__)


class ConnectionError(Exception):
    """Failed to establish SSH connection after retry."""

    def __init__(self, host_name: str, original_error: Exception):
        """Initialize connection error.

        Args:
            host_name: Name of the SSH host
            original_error: Original exception that caused the failure
        """
        self.host_name = host_name
        self.original_error = original_error
        super().__init__(f"Cannot connect to {host_name}: {original_error}")


def _connect_options(host: SSHHost, known_hosts: str | None) -> dict[str, Any]:
    # Unset values are omitted so asyncssh can apply ~/.ssh/config
    options: dict[str, Any] = {"known_hosts": known_hosts}
    if host.user:
        options["username"] = host.user
    if host.port:
        options["port"] = host.port
    if host.identity_file:
        options["client_keys"] = [host.identity_file]
    return options


async def _connect(
    host: SSHHost,
    known_hosts: str | None,
    strict_host_key_checking: bool,
) -> asyncssh.SSHClientConnection:
    options = _connect_options(host, known_hosts)
    try:
        return await asyncssh.connect(host.hostname, **options)
    except asyncssh.HostKeyNotVerifiable as e:
        if strict_host_key_checking:
            logger.error(
                "Host key verification failed for %s: %s. "
                "Add the host key to %s or set "
                "REMOTE_IVT_STRICT_HOST_KEY_CHECKING=false",
                host.name,
                e,
                known_hosts,
            )
            raise
        logger.warning(
            "Host key not verified for %s (strict mode disabled): %s",
            host.name,
            e,
        )
        options["known_hosts"] = None
        return await asyncssh.connect(host.hostname, **options)


async def open_session(
    host: SSHHost,
    known_hosts: str | None = None,
    strict_host_key_checking: bool = True,
) -> SSHSession:
    """Open an SSH session with one retry on failure.

    Args:
        host: SSH host to connect to
        known_hosts: Path to known_hosts file, or None to disable verification
        strict_host_key_checking: Whether to reject unknown host keys

    Returns:
        Session over a fresh connection, owned by the caller

    Raises:
        ConnectionError: If connection fails after retry
    """
    logger.info("Opening SSH session to %s (%s)", host.name, host.display)
    try:
        conn = await _connect(host, known_hosts, strict_host_key_checking)
    except Exception as first_error:
        logger.warning(
            "Connection to %s failed: %s, retrying once",
            host.name,
            first_error,
        )
        try:
            conn = await _connect(host, known_hosts, strict_host_key_checking)
            logger.info("Retry connection to %s succeeded", host.name)
        except Exception as retry_error:
            logger.error(
                "Retry connection to %s failed: %s",
                host.name,
                retry_error,
            )
            raise ConnectionError(host.name, retry_error) from retry_error

    logger.info("SSH session established to %s", host.name)
    return SSHSession(conn, host)
