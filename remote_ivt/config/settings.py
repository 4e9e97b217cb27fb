"""Run settings from environment variables."""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ENV_PREFIX = "REMOTE_IVT_"


@dataclass
class Settings:
    """Run settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Target host
    host: str = field(default="")
    user: str | None = field(default=None)
    port: int | None = field(default=None)
    identity_file: str | None = field(default=None)

    # Evidence
    evidence_root: str = field(default="./evidence")

    # Runtime under test
    maven_repository: str = field(default="")
    runtime_version: str = field(default="0.3.0-SNAPSHOT")

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from ``REMOTE_IVT_*`` environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            host=cls._get_str("HOST") or "",
            user=cls._get_str("USER"),
            port=cls._get_int("PORT", None),
            identity_file=cls._get_str("IDENTITY_FILE"),
            evidence_root=cls._get_str("EVIDENCE_ROOT") or "./evidence",
            maven_repository=cls._get_str("MAVEN_REPOSITORY") or "",
            runtime_version=cls._get_str("RUNTIME_VERSION") or "0.3.0-SNAPSHOT",
            log_level=(cls._get_str("LOG_LEVEL") or "INFO").upper(),
            log_colors=cls._get_bool("LOG_COLORS", True),
        )

    @staticmethod
    def _get_str(key: str) -> str | None:
        """Get a stripped string, treating empty values as unset."""
        value = os.getenv(ENV_PREFIX + key, "").strip()
        return value or None

    @staticmethod
    def _get_int(key: str, default: int | None) -> int | None:
        """Get integer from environment.

        Args:
            key: Variable name without the prefix
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(ENV_PREFIX + key)
        if value is None or not value.strip():
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Invalid int for %s%s: %s, using default %s", ENV_PREFIX, key, value, default
            )
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Variable name without the prefix
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
