"""
Secure Configuration Module
===========================

Provides immutable, environment-aware configuration with security-first defaults.

Security Features:
- Immutable configuration after initialization
- Environment variable override support
- No secrets in configuration (sensitive keys are ignored)
- OS-aware path handling

Format parameters (cipher, KDF cost, field sizes) are NOT configuration:
they live in storecrypt.core.crypto.constants because every stored value
depends on them.
"""

from __future__ import annotations

import hashlib
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Optional


# Security Constants
_SENSITIVE_KEYS: Final[frozenset[str]] = frozenset({
    "password", "secret", "key", "token", "api_key",
    "private", "credential", "auth", "salt"
})

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def _is_sensitive_key(key: str) -> bool:
    """Check if a configuration key might contain sensitive data."""
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS)


def _get_default_log_dir() -> Path:
    """Get OS-appropriate default log directory."""
    system = platform.system().lower()

    if system == "windows":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
        return base / "StoreCrypt" / "Logs"
    elif system == "darwin":
        return Path.home() / "Library" / "Logs" / "StoreCrypt"
    else:  # Linux and others
        return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state")) / "StoreCrypt" / "logs"


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Immutable path configuration with OS-aware defaults."""

    log_dir: Path = field(default_factory=_get_default_log_dir)

    def __post_init__(self) -> None:
        """Validate paths after initialization."""
        if not self.log_dir.is_absolute():
            raise ValueError(f"log_dir must be an absolute path: {self.log_dir}")


@dataclass(frozen=True, slots=True)
class CryptoConfig:
    """Immutable runtime limits for the encryption entry points."""

    # Upper bound on the UTF-8 size of one plaintext value
    max_plaintext_bytes: int = 2 * 1024 * 1024  # 2 MiB

    def __post_init__(self) -> None:
        """Validate crypto settings."""
        if self.max_plaintext_bytes < 1:
            raise ValueError("max_plaintext_bytes must be at least 1")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable logging configuration."""

    level: str = "WARNING"
    max_file_size_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    enable_console: bool = False
    enable_file: bool = False
    json: bool = False

    def __post_init__(self) -> None:
        """Validate logging settings."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {self.level}")


class StoreCryptConfig:
    """
    Centralized, immutable configuration loader with environment override support.

    Usage:
        config = StoreCryptConfig.load()
        limit = config.crypto.max_plaintext_bytes
        level = config.logging.level

    Environment variables are prefixed with STORECRYPT_ and use double
    underscores for nested values:
        STORECRYPT_LOGGING__LEVEL=DEBUG
        STORECRYPT_CRYPTO__MAX_PLAINTEXT_BYTES=65536
        STORECRYPT_PATHS__LOG_DIR=/var/log/storecrypt
    """

    __slots__ = ("_paths", "_crypto", "_logging", "_frozen", "_config_hash")

    _instance: Optional[StoreCryptConfig] = None

    def __init__(
        self,
        paths: Optional[PathConfig] = None,
        crypto: Optional[CryptoConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ) -> None:
        """Initialize configuration. Use StoreCryptConfig.load() for standard initialization."""
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_paths", paths or PathConfig())
        object.__setattr__(self, "_crypto", crypto or CryptoConfig())
        object.__setattr__(self, "_logging", logging or LoggingConfig())
        object.__setattr__(self, "_config_hash", self._compute_hash())
        object.__setattr__(self, "_frozen", True)

    def _compute_hash(self) -> str:
        """Compute a hash of the configuration for integrity checking."""
        config_str = f"{self._paths}|{self._crypto}|{self._logging}"
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @property
    def paths(self) -> PathConfig:
        """Get path configuration."""
        return self._paths

    @property
    def crypto(self) -> CryptoConfig:
        """Get crypto limits."""
        return self._crypto

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._logging

    @property
    def config_hash(self) -> str:
        """Get configuration integrity hash."""
        return self._config_hash

    @classmethod
    def load(cls, env_prefix: str = "STORECRYPT") -> StoreCryptConfig:
        """
        Load configuration with environment variable overrides.

        Args:
            env_prefix: Prefix for environment variables (default: STORECRYPT)

        Returns:
            Configured StoreCryptConfig instance

        Raises:
            ValueError: If an override has an invalid value
        """
        env_overrides = cls._parse_env_overrides(env_prefix)

        paths_kwargs: dict[str, Any] = {}
        if "paths.log_dir" in env_overrides:
            paths_kwargs["log_dir"] = Path(env_overrides["paths.log_dir"])

        crypto_kwargs: dict[str, Any] = {}
        if "crypto.max_plaintext_bytes" in env_overrides:
            crypto_kwargs["max_plaintext_bytes"] = int(
                env_overrides["crypto.max_plaintext_bytes"]
            )

        logging_kwargs: dict[str, Any] = {}
        if "logging.level" in env_overrides:
            logging_kwargs["level"] = env_overrides["logging.level"].upper()
        for flag in ("enable_console", "enable_file", "json"):
            if f"logging.{flag}" in env_overrides:
                logging_kwargs[flag] = env_overrides[f"logging.{flag}"].lower() in _TRUE_VALUES

        return cls(
            paths=PathConfig(**paths_kwargs) if paths_kwargs else None,
            crypto=CryptoConfig(**crypto_kwargs) if crypto_kwargs else None,
            logging=LoggingConfig(**logging_kwargs) if logging_kwargs else None,
        )

    @staticmethod
    def _parse_env_overrides(prefix: str) -> dict[str, str]:
        """Parse environment variables with the given prefix."""
        overrides: dict[str, str] = {}
        prefix_upper = f"{prefix.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix_upper):
                # Convert STORECRYPT_SECTION__KEY to section.key
                config_key = key[len(prefix_upper):].lower().replace("__", ".")

                # SECURITY: Skip sensitive keys from environment
                if _is_sensitive_key(config_key):
                    continue

                overrides[config_key] = value

        return overrides

    @classmethod
    def get_instance(cls) -> StoreCryptConfig:
        """
        Get or create the singleton configuration instance.

        Returns:
            The global StoreCryptConfig instance
        """
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. Use only for testing."""
        cls._instance = None

    def __repr__(self) -> str:
        """Safe string representation without sensitive data."""
        return f"StoreCryptConfig(hash={self._config_hash})"

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, "_frozen") and self._frozen:
            raise AttributeError("StoreCryptConfig is immutable after initialization")
        super().__setattr__(name, value)
