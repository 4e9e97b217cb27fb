"""Services for remote IVT runs."""

from remote_ivt.services.connection import ConnectionError, open_session
from remote_ivt.services.evidence import FileEvidenceStore
from remote_ivt.services.runner import CommandRunner
from remote_ivt.services.session import SSHSession

__all__ = [
    "CommandRunner",
    "ConnectionError",
    "FileEvidenceStore",
    "open_session",
    "SSHSession",
]
