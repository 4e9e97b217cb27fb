"""SSH-related data models."""

from dataclasses import dataclass


@dataclass
class SSHHost:
    """SSH host to open a session against.

    Unset fields are left to asyncssh, which fills them from ``~/.ssh/config``
    when ``hostname`` is an alias defined there.
    """

    name: str
    hostname: str
    user: str | None = None
    port: int | None = None
    identity_file: str | None = None

    @property
    def display(self) -> str:
        """Get a ``user@host:port`` label for log lines."""
        label = self.hostname
        if self.user:
            label = f"{self.user}@{label}"
        if self.port:
            label = f"{label}:{self.port}"
        return label
