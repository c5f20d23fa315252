"""Unit tests for the AES-256-GCM text cipher."""

import dataclasses
import secrets

import pytest

from storecrypt.core.crypto.aes_gcm import AesGcmCipher
from storecrypt.core.crypto.constants import AES_KEY_SIZE, AES_NONCE_SIZE, AES_TAG_SIZE, SALT_SIZE
from storecrypt.core.errors import EncryptionError, IntegrityError, ValidationError


@pytest.fixture
def cipher() -> AesGcmCipher:
    return AesGcmCipher()


@pytest.fixture
def key() -> bytearray:
    return bytearray(secrets.token_bytes(AES_KEY_SIZE))


@pytest.fixture
def salt() -> bytes:
    return secrets.token_bytes(SALT_SIZE)


class TestEncrypt:
    """Tests for AesGcmCipher.encrypt."""

    def test_envelope_field_sizes(self, cipher, key, salt):
        """Ciphertext has the UTF-8 length; nonce and tag have fixed sizes."""
        env = cipher.encrypt("héllo", key, salt)
        assert len(env.nonce) == AES_NONCE_SIZE
        assert len(env.tag) == AES_TAG_SIZE
        assert len(env.ciphertext) == len("héllo".encode("utf-8"))
        assert env.salt == salt

    def test_fresh_nonce_per_call(self, cipher, key, salt):
        """Nonces are never reused, even for the same key and plaintext."""
        nonces = {cipher.encrypt("same", key, salt).nonce for _ in range(20)}
        assert len(nonces) == 20

    def test_accepts_bytes_key(self, cipher, salt):
        """Immutable keys work too."""
        key = secrets.token_bytes(AES_KEY_SIZE)
        assert cipher.decrypt(cipher.encrypt("x", key, salt), key) == "x"

    def test_wrong_key_size_rejected(self, cipher, salt):
        with pytest.raises(ValidationError, match="Key must be exactly"):
            cipher.encrypt("x", bytearray(16), salt)

    def test_wrong_salt_size_rejected(self, cipher, key):
        with pytest.raises(ValidationError, match="Salt must be exactly"):
            cipher.encrypt("x", key, b"short")

    def test_unencodable_plaintext_rejected(self, cipher, key, salt):
        """Lone surrogates cannot be UTF-8 encoded."""
        with pytest.raises(EncryptionError, match="not UTF-8 encodable"):
            cipher.encrypt("bad \ud800 text", key, salt)


class TestDecrypt:
    """Tests for AesGcmCipher.decrypt."""

    def test_roundtrip(self, cipher, key, salt):
        env = cipher.encrypt("hello world", key, salt)
        assert cipher.decrypt(env, key) == "hello world"

    def test_wrong_key_fails_integrity(self, cipher, key, salt):
        """A different key never yields plaintext."""
        env = cipher.encrypt("hello world", key, salt)
        with pytest.raises(IntegrityError):
            cipher.decrypt(env, bytearray(secrets.token_bytes(AES_KEY_SIZE)))

    @pytest.mark.parametrize("field", ["nonce", "salt", "ciphertext", "tag"])
    def test_modified_field_fails_integrity(self, cipher, key, salt, field):
        """Changing any envelope field is detected."""
        env = cipher.encrypt("hello world", key, salt)
        value = bytearray(getattr(env, field))
        value[0] ^= 0x01
        tampered = dataclasses.replace(env, **{field: bytes(value)})
        with pytest.raises(IntegrityError):
            cipher.decrypt(tampered, key)

    def test_wrong_key_size_rejected(self, cipher, key, salt):
        env = cipher.encrypt("x", key, salt)
        with pytest.raises(ValidationError):
            cipher.decrypt(env, bytearray(31))
