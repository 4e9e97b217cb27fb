"""Protocol interfaces for the collaborators the runner borrows.

``CommandRunner`` depends only on these, so tests and other orchestrators can
hand in any object with the right shape:

    class RecordingSession:
        async def issue_command(self, text: str) -> str:
            return "rc=0\n"
        ...

    result = await CommandRunner(store).run(RecordingSession(), spec)
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class RemoteSession(Protocol):
    """An established shell session on a remote host.

    The session is owned by whoever opened it. Callers borrow it for one
    command at a time and never close it.
    """

    async def issue_command(self, text: str) -> str:
        """Run a command line and return its combined output.

        Raises:
            ExecutionError: With kind SESSION_UNAVAILABLE on transport failure
        """
        ...

    async def fetch_file(self, path: str) -> bytes:
        """Read a remote file. Relative paths resolve against the home directory.

        Raises:
            OSError: If the file is missing or unreadable
        """
        ...

    async def put_file(self, path: str, data: bytes) -> None:
        """Write a remote file, creating missing parent directories."""
        ...

    async def home(self) -> str:
        """Get the absolute home directory of the session user."""
        ...


@runtime_checkable
class EvidenceStore(Protocol):
    """Write-only sink for logs kept after a run.

    Names are unique per run; writing an existing name replaces it.
    """

    def write(self, name: str, data: bytes) -> Path:
        """Store ``data`` under ``name`` and return where it landed.

        Raises:
            OSError: If the data cannot be stored
        """
        ...

    def names(self) -> list[str]:
        """List stored names in write order."""
        ...
