"""Stored-artifact directory for logs archived during a run."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from remote_ivt.utils.validation import validate_evidence_name

logger = logging.getLogger(__name__)


class FileEvidenceStore:
    """Evidence store backed by a local directory.

    Each name maps to one file under ``root``. Writing a name twice replaces
    the earlier content and logs a warning.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self._names: list[str] = []

    @classmethod
    def for_run(cls, base: Path | str, run_name: str) -> "FileEvidenceStore":
        """Create a store in a fresh timestamped directory under ``base``.

        Args:
            base: Directory that collects evidence of all runs
            run_name: Label for this run (e.g. the suite name)

        Returns:
            Store rooted at ``base/<run_name>-<UTC timestamp>``
        """
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        root = Path(base) / f"{run_name}-{stamp}"
        suffix = 0
        while root.exists():
            suffix += 1
            root = Path(base) / f"{run_name}-{stamp}-{suffix}"
        root.mkdir(parents=True)
        logger.info("Evidence for this run goes to %s", root)
        return cls(root)

    def write(self, name: str, data: bytes) -> Path:
        """Store ``data`` under ``name``.

        Raises:
            PathTraversalError: If the name escapes the store root
            OSError: If the file cannot be written
        """
        name = validate_evidence_name(name)
        target = self.root / name
        if name in self._names:
            logger.warning("Evidence %s already stored, overwriting", name)
            self._names.remove(name)

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        self._names.append(name)
        logger.info("Stored evidence %s (%d bytes)", name, len(data))
        return target

    def names(self) -> list[str]:
        """List stored names in write order."""
        return list(self._names)
