"""Utilities for remote IVT runs."""

from remote_ivt.utils.console import ColorfulFormatter
from remote_ivt.utils.marker import marker_fragment, parse_marker, wrap_command
from remote_ivt.utils.validation import PathTraversalError, validate_evidence_name

__all__ = [
    "ColorfulFormatter",
    "marker_fragment",
    "parse_marker",
    "PathTraversalError",
    "validate_evidence_name",
    "wrap_command",
]
