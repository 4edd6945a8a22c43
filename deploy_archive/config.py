"""
Configuration Management for deploy-archive

Runtime settings with environment variable support and validation.
Per-build options (sources, ignore list, output name...) are not read
from the environment; they are passed explicitly as a BuildRequest.

Environment Variables:
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    DEBUG: Enable debug logging (true/false)
    ARCHIVE_WORK_DIR: Directory application paths are resolved against
        (default: current working directory)
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger("deploy-archive")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """
    Runtime configuration.

    Validates all settings on initialization.
    """

    log_level: str = "INFO"
    debug: bool = False
    work_dir: Optional[str] = None

    def __post_init__(self):
        """Validate configuration"""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}")
        if self.work_dir is not None and not self.work_dir.strip():
            raise ValueError("work_dir can't be blank")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def resolve_work_dir(self) -> str:
        """Working directory to resolve application paths against"""
        return os.path.abspath(self.work_dir) if self.work_dir else os.getcwd()

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Returns:
            Validated Config object

        Raises:
            ValueError: If configuration is invalid
        """
        config = cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            work_dir=os.getenv("ARCHIVE_WORK_DIR") or None,
        )

        log.debug(f"Configuration loaded from environment: {config.to_dict()}")

        return config

    def to_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "debug": self.debug,
            "work_dir": self.work_dir,
        }


# Global configuration instance (singleton)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Loads from environment on first call, then returns cached instance.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration (used by tests)."""
    global _config
    _config = None
