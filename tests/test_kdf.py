"""Unit tests for Argon2id key derivation."""

import pytest

from storecrypt.core.crypto.constants import AES_KEY_SIZE, SALT_SIZE
from storecrypt.core.crypto.kdf import derive_key, generate_salt
from storecrypt.core.errors import ValidationError


class TestGenerateSalt:
    """Tests for salt generation."""

    def test_salt_has_format_length(self):
        """Salt is 16 bytes."""
        assert len(generate_salt()) == SALT_SIZE

    def test_salt_is_random(self):
        """Each salt is unique."""
        salts = {generate_salt() for _ in range(10)}
        assert len(salts) == 10


class TestDeriveKey:
    """Tests for derive_key."""

    def test_key_is_32_byte_bytearray(self):
        """Derived key is a mutable 32-byte buffer."""
        key = derive_key("s", generate_salt())
        assert isinstance(key, bytearray)
        assert len(key) == AES_KEY_SIZE

    def test_deterministic_for_same_secret_and_salt(self):
        """Same secret and salt always give the same key."""
        salt = generate_salt()
        assert derive_key("mySecret123", salt) == derive_key("mySecret123", salt)

    def test_different_secrets_give_different_keys(self):
        """Different secrets give different keys."""
        salt = generate_salt()
        assert derive_key("alpha", salt) != derive_key("beta", salt)

    def test_different_salts_give_different_keys(self):
        """The salt changes the key."""
        assert derive_key("alpha", generate_salt()) != derive_key("alpha", generate_salt())

    def test_known_vector_is_stable(self):
        """A fixed input always maps to the same key across runs."""
        salt = bytes(range(SALT_SIZE))
        first = derive_key("correct horse battery staple", salt)
        second = derive_key("correct horse battery staple", bytearray(salt))
        assert first == second

    def test_long_secret_is_not_truncated(self):
        """Secrets longer than the key length still influence the key."""
        salt = generate_salt()
        base = "x" * 100
        assert derive_key(base + "a", salt) != derive_key(base + "b", salt)

    def test_unicode_secret(self):
        """Non-ASCII secrets are accepted."""
        key = derive_key("pässwörd-🔑", generate_salt())
        assert len(key) == AES_KEY_SIZE

    def test_empty_secret_rejected(self):
        """Empty secret is a caller error."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            derive_key("", generate_salt())

    def test_non_string_secret_rejected(self):
        """Secrets must be strings."""
        with pytest.raises(ValidationError, match="must be a string"):
            derive_key(b"bytes", generate_salt())

    def test_wrong_salt_size_rejected(self):
        """Salt must have the format length."""
        with pytest.raises(ValidationError, match="Salt must be exactly"):
            derive_key("s", b"short")
