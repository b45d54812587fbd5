"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from jailfs.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_ROOT_DIRECTORY = "/mysql/data"
SUPPORTED_BACKENDS = ("local", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.root_directory: str = self._get_env("JAILFS_ROOT", DEFAULT_ROOT_DIRECTORY)
        self.backend: str = self._get_choice_env(
            "JAILFS_BACKEND", "local", SUPPORTED_BACKENDS
        )
        self.log_level: str = self._get_choice_env(
            "JAILFS_LOG_LEVEL", "WARNING", LOG_LEVELS, upper=True
        )
        self.max_read_bytes: int = self._get_int_env("JAILFS_MAX_READ_BYTES", 1024 * 1024)
        self.bytes_per_line: int = self._get_int_env("JAILFS_BYTES_PER_LINE", 8)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value < 1:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_choice_env(
        self, key: str, default: str, choices: tuple[str, ...], upper: bool = False
    ) -> str:
        """Get an environment variable restricted to a set of values, case-folded to upper or lower."""
        value = self._get_env(key, default).strip()
        normalized = value.upper() if upper else value.lower()
        if normalized not in choices:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(choices)}, got {value!r}"
            )
        return normalized

