"""Configuration module for remote IVT runs.

- Config: Main configuration class (aggregates all components)
- HostKeyVerifier: Resolves the known_hosts file
- Settings: Environment variable configuration
"""

from remote_ivt.config.host_keys import HostKeyVerifier
from remote_ivt.config.main import Config
from remote_ivt.config.settings import Settings

__all__ = ["Config", "HostKeyVerifier", "Settings"]
