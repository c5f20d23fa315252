"""Tests for StoreCryptConfig."""

from pathlib import Path

import pytest

from storecrypt.core.config import (
    CryptoConfig,
    LoggingConfig,
    PathConfig,
    StoreCryptConfig,
)


class TestDefaults:
    """Default values."""

    def test_defaults(self):
        config = StoreCryptConfig()
        assert config.crypto.max_plaintext_bytes == 2 * 1024 * 1024
        assert config.logging.level == "WARNING"
        assert config.logging.enable_file is False
        assert config.logging.enable_console is False
        assert config.paths.log_dir.is_absolute()

    def test_repr_is_safe(self):
        assert repr(StoreCryptConfig()).startswith("StoreCryptConfig(hash=")


class TestValidation:
    """Section validation."""

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(level="LOUD")

    def test_non_positive_limit(self):
        with pytest.raises(ValueError, match="at least 1"):
            CryptoConfig(max_plaintext_bytes=0)

    def test_relative_log_dir(self):
        with pytest.raises(ValueError, match="absolute"):
            PathConfig(log_dir=Path("relative/logs"))


class TestImmutability:
    """Configuration cannot change after creation."""

    def test_setattr_blocked(self):
        config = StoreCryptConfig()
        with pytest.raises(AttributeError, match="immutable"):
            config._crypto = CryptoConfig(max_plaintext_bytes=1)

    def test_sections_frozen(self):
        config = StoreCryptConfig()
        with pytest.raises(AttributeError):
            config.crypto.max_plaintext_bytes = 1


class TestEnvironment:
    """Environment overrides."""

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORECRYPT_LOGGING__LEVEL", "debug")
        monkeypatch.setenv("STORECRYPT_LOGGING__JSON", "true")
        monkeypatch.setenv("STORECRYPT_CRYPTO__MAX_PLAINTEXT_BYTES", "1024")
        monkeypatch.setenv("STORECRYPT_PATHS__LOG_DIR", str(tmp_path))

        config = StoreCryptConfig.load()

        assert config.logging.level == "DEBUG"
        assert config.logging.json is True
        assert config.crypto.max_plaintext_bytes == 1024
        assert config.paths.log_dir == tmp_path

    def test_sensitive_keys_ignored(self, monkeypatch):
        """Secrets are never read from the environment."""
        monkeypatch.setenv("STORECRYPT_CRYPTO__SECRET", "hunter2")
        monkeypatch.setenv("STORECRYPT_CRYPTO__KEY", "abc")

        assert "crypto.secret" not in StoreCryptConfig._parse_env_overrides("STORECRYPT")
        assert "crypto.key" not in StoreCryptConfig._parse_env_overrides("STORECRYPT")

    def test_invalid_override_raises(self, monkeypatch):
        monkeypatch.setenv("STORECRYPT_LOGGING__LEVEL", "nope")
        with pytest.raises(ValueError):
            StoreCryptConfig.load()

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_CRYPTO__MAX_PLAINTEXT_BYTES", "99")
        assert StoreCryptConfig.load(env_prefix="MYAPP").crypto.max_plaintext_bytes == 99


class TestSingleton:
    """Global instance handling."""

    def test_get_instance_cached(self):
        assert StoreCryptConfig.get_instance() is StoreCryptConfig.get_instance()

    def test_reset_instance(self):
        first = StoreCryptConfig.get_instance()
        StoreCryptConfig.reset_instance()
        assert StoreCryptConfig.get_instance() is not first
