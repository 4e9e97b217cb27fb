"""IVT suites built on the command runner."""

from remote_ivt.suites.commandline import CommandLineIVT
from remote_ivt.suites.skeletons import render_skeleton

__all__ = ["CommandLineIVT", "render_skeleton"]
