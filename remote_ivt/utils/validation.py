"""Evidence name validation."""

import os
from pathlib import PurePosixPath


class PathTraversalError(ValueError):
    """Evidence name would escape the evidence root."""

    pass


def validate_evidence_name(name: str) -> str:
    """Validate an evidence name and return it normalized.

    Args:
        name: Relative name under the evidence root (may contain ``/``)

    Returns:
        Normalized relative name

    Raises:
        PathTraversalError: If the name is absolute or escapes the root
        ValueError: If the name is empty
    """
    if not name or not name.strip():
        raise ValueError("Evidence name cannot be empty")

    if "\x00" in name:
        raise PathTraversalError(f"Evidence name contains null byte: {name!r}")

    if PurePosixPath(name).is_absolute() or os.path.isabs(name):
        raise PathTraversalError(f"Evidence name must be relative: {name}")

    normalized = os.path.normpath(name)
    if normalized == ".." or normalized.startswith(".." + os.sep):
        raise PathTraversalError(f"Evidence name escapes evidence root: {name}")
    if normalized == ".":
        raise ValueError(f"Evidence name does not name a file: {name}")

    return normalized
