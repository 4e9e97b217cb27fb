"""Exit-status markers embedded in remote command output.

A command line is wrapped as ``<command>;echo <marker>=$?`` so the remote
shell prints its own exit status as plain text after the pipeline finishes.
"""

import re

TRAILING_OPERATOR_PATTERN = re.compile(r"(?<!\\)[&|]$")


def ends_with_operator(command_line: str) -> bool:
    """Check whether a command line ends in ``&``, ``|``, ``&&`` or ``||``."""
    return bool(TRAILING_OPERATOR_PATTERN.search(command_line.rstrip().rstrip(";").rstrip()))


def marker_fragment(marker_name: str) -> str:
    """Get the fragment that echoes the exit status for ``marker_name``."""
    return f";echo {marker_name}=$?"


def wrap_command(command_line: str, marker_name: str) -> str:
    """Append the marker fragment unless the command already ends with it.

    Trailing whitespace and semicolons are dropped first, since ``cmd;;echo``
    is a shell syntax error. A line ending in a background or pipe operator
    cannot take the fragment (``cmd &;echo`` does not parse).

    Args:
        command_line: Shell pipeline to run
        marker_name: Marker token to echo

    Returns:
        Command line ending in exactly one marker fragment

    Raises:
        ValueError: If the command line ends in an operator
    """
    if ends_with_operator(command_line):
        raise ValueError(f"Command line ends in an operator: {command_line!r}")
    fragment = marker_fragment(marker_name)
    line = command_line.rstrip()
    if line.endswith(fragment):
        return line
    return line.rstrip(";").rstrip() + fragment


def parse_marker(raw_output: str, marker_name: str) -> int | None:
    """Extract the exit status echoed for ``marker_name``.

    The last occurrence wins, since the fragment always runs after the
    pipeline. Output that never reached the echo yields None.

    Args:
        raw_output: Combined output of the remote command
        marker_name: Marker token to look for

    Returns:
        Echoed exit status, or None if the marker is absent
    """
    pattern = rf"(?<![\w.-]){re.escape(marker_name)}=(-?\d+)"
    matches = re.findall(pattern, raw_output)
    if not matches:
        return None
    return int(matches[-1])
