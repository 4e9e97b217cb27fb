"""asyncssh-backed remote session."""

import logging
import posixpath
from typing import TYPE_CHECKING

import asyncssh

from remote_ivt.errors import ErrorKind, ExecutionError

if TYPE_CHECKING:
    from remote_ivt.models import SSHHost

logger = logging.getLogger(__name__)


def _decode(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class SSHSession:
    """Shell and file access over one established SSH connection.

    Commands run through ``conn.run`` with stderr folded into stdout, so the
    text returned by ``issue_command`` is what an interactive shell would
    print. Files move over SFTP, whose relative paths start in the login
    home directory.
    """

    def __init__(
        self,
        conn: "asyncssh.SSHClientConnection",
        host: "SSHHost | None" = None,
    ) -> None:
        self.conn = conn
        self.host = host
        self._home: str | None = None

    @property
    def name(self) -> str:
        """Get a label for log lines."""
        return self.host.name if self.host else "remote"

    def _unavailable(self, action: str, error: BaseException) -> ExecutionError:
        logger.error("Session to %s unavailable during %s: %s", self.name, action, error)
        return ExecutionError(
            ErrorKind.SESSION_UNAVAILABLE,
            f"Session to {self.name} unavailable during {action}: {error}",
            original_error=error,
        )

    async def issue_command(self, text: str) -> str:
        """Run a command line and return combined stdout and stderr.

        Raises:
            ExecutionError: SESSION_UNAVAILABLE if the connection fails
        """
        logger.debug("Running on %s: %s", self.name, text)
        try:
            result = await self.conn.run(text, check=False, stderr=asyncssh.STDOUT)
        except (asyncssh.Error, OSError) as e:
            raise self._unavailable("command", e) from e

        output = _decode(result.stdout)
        logger.debug(
            "Command on %s exited with %s (%d bytes of output)",
            self.name,
            result.exit_status,
            len(output),
        )
        return output

    async def fetch_file(self, path: str) -> bytes:
        """Read a remote file over SFTP.

        Raises:
            FileNotFoundError: If the file does not exist
            PermissionError: If the file cannot be read
            OSError: On any other SFTP failure
            ExecutionError: SESSION_UNAVAILABLE if the connection fails
        """
        try:
            async with self.conn.start_sftp_client() as sftp:
                async with sftp.open(path, "rb") as remote_file:
                    data = await remote_file.read()
        except asyncssh.SFTPNoSuchFile as e:
            raise FileNotFoundError(f"Remote file not found: {path}") from e
        except (asyncssh.SFTPConnectionLost, asyncssh.SFTPNoConnection) as e:
            raise self._unavailable("file fetch", e) from e
        except asyncssh.SFTPPermissionDenied as e:
            raise PermissionError(f"Permission denied reading {path}") from e
        except asyncssh.SFTPError as e:
            raise OSError(f"Cannot read {path}: {e.reason}") from e
        except (asyncssh.Error, OSError) as e:
            raise self._unavailable("file fetch", e) from e

        logger.debug("Fetched %s from %s (%d bytes)", path, self.name, len(data))
        return data if isinstance(data, bytes) else data.encode("utf-8")

    async def put_file(self, path: str, data: bytes) -> None:
        """Write a remote file over SFTP, creating parent directories.

        Raises:
            PermissionError: If the file cannot be written
            OSError: On any other SFTP failure
            ExecutionError: SESSION_UNAVAILABLE if the connection fails
        """
        parent = posixpath.dirname(path)
        try:
            async with self.conn.start_sftp_client() as sftp:
                if parent:
                    await sftp.makedirs(parent, exist_ok=True)
                async with sftp.open(path, "wb") as remote_file:
                    await remote_file.write(data)
        except (asyncssh.SFTPConnectionLost, asyncssh.SFTPNoConnection) as e:
            raise self._unavailable("file upload", e) from e
        except asyncssh.SFTPPermissionDenied as e:
            raise PermissionError(f"Permission denied writing {path}") from e
        except asyncssh.SFTPError as e:
            raise OSError(f"Cannot write {path}: {e.reason}") from e
        except (asyncssh.Error, OSError) as e:
            raise self._unavailable("file upload", e) from e

        logger.info("Wrote %s on %s (%d bytes)", path, self.name, len(data))

    async def home(self) -> str:
        """Get the login home directory, resolved once per session."""
        if self._home is None:
            try:
                async with self.conn.start_sftp_client() as sftp:
                    self._home = _decode(await sftp.realpath("."))
            except (asyncssh.Error, OSError) as e:
                raise self._unavailable("home lookup", e) from e
            logger.debug("Home directory on %s is %s", self.name, self._home)
        return self._home

    def close(self) -> None:
        """Close the underlying connection. Only the session's owner calls this."""
        self.conn.close()
