"""Runtime configuration.

All settings can be overridden via environment variables with the
MERKLETREE_ prefix.
"""
import logging
import os
from dataclasses import dataclass

from .constants import DEFAULT_HASH, DEFAULT_LOG_LEVEL, ENV_PREFIX, SUPPORTED_HASHES
from .errors import UnsupportedHash


@dataclass
class TreeConfig:
    """Tree and command line configuration."""

    # Hashing
    hash_algorithm: str = DEFAULT_HASH

    # Diagnostics
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.hash_algorithm = self.hash_algorithm.lower()
        if self.hash_algorithm not in SUPPORTED_HASHES:
            raise UnsupportedHash(self.hash_algorithm)
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "TreeConfig":
        """Load configuration from environment variables.

        MERKLETREE_HASH selects the hash algorithm, MERKLETREE_LOG_LEVEL
        the logging level used by the command line.
        """
        kwargs = {}
        if f"{ENV_PREFIX}HASH" in os.environ:
            kwargs["hash_algorithm"] = os.environ[f"{ENV_PREFIX}HASH"]
        if f"{ENV_PREFIX}LOG_LEVEL" in os.environ:
            kwargs["log_level"] = os.environ[f"{ENV_PREFIX}LOG_LEVEL"]
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "hash_algorithm": self.hash_algorithm,
            "log_level": self.log_level,
        }


DEFAULT_CONFIG = TreeConfig()
