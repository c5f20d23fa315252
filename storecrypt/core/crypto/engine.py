"""
Text Encryption Engine
======================

Composes key derivation, AES-256-GCM and the envelope encoding into the
two public operations:

    encrypt(plaintext, secret) -> "AES256:..."
    decrypt(encoded, secret)   -> plaintext

Encryption Flow:
    secret + random salt
        ↓ Argon2id
    key (32 bytes, zeroed after use)
        ↓ AES-256-GCM (random nonce, AAD = prefix || salt)
    envelope (nonce | salt | ciphertext | tag)
        ↓ base64 + "AES256:" prefix
    encoded string

Decryption Flow:
    encoded string
        ↓ check prefix, base64-decode, split fields
    envelope
        ↓ Argon2id with embedded salt
    key (zeroed after use)
        ↓ AES-256-GCM decrypt (verify tag)
    plaintext

The engine holds no state; concurrent calls are independent.
"""

from __future__ import annotations

import logging
from typing import Optional

from storecrypt.core.config import StoreCryptConfig
from storecrypt.core.crypto.aes_gcm import AesGcmCipher
from storecrypt.core.crypto.envelope import EncryptionEnvelope
from storecrypt.core.crypto.kdf import derive_key, generate_salt
from storecrypt.core.errors import StoreCryptError
from storecrypt.core.logging import SecureLogFilter
from storecrypt.core.memory.zeroization import ZeroizeContext
from storecrypt.utils.validators import validate_plaintext, validate_secret

# Records propagate to the host application, already sanitized
logger = logging.getLogger(__name__)
logger.addFilter(SecureLogFilter())
logger.addHandler(logging.NullHandler())


class TextCryptoEngine:
    """
    Stateless secret-based text encryption.

    Usage:
        engine = TextCryptoEngine()

        encoded = engine.encrypt("hello world", "mySecret123")
        plaintext = engine.decrypt(encoded, "mySecret123")

    Security Notes:
        - A fresh salt and nonce are generated for every encryption
        - Derived keys are zeroed on every exit path
        - Secrets never appear in logs or exception messages
    """

    __slots__ = ()

    def encrypt(
        self,
        plaintext: str,
        secret: str,
        config: Optional[StoreCryptConfig] = None,
    ) -> str:
        """
        Encrypt a string with a secret.

        Args:
            plaintext: Text to encrypt (can be empty)
            secret: Caller secret (non-empty)
            config: Configuration for size limits (global instance by default)

        Returns:
            Encoded string: "AES256:" followed by base64

        Raises:
            ValidationError: If the secret is empty or plaintext too large
            EncryptionError: If plaintext is not UTF-8 encodable
        """
        config = config or StoreCryptConfig.get_instance()
        validate_secret(secret)
        validate_plaintext(plaintext, max_bytes=config.crypto.max_plaintext_bytes)

        salt = generate_salt()
        key = derive_key(secret, salt)
        with ZeroizeContext(key):
            try:
                envelope = AesGcmCipher().encrypt(plaintext, key, salt)
            except StoreCryptError as e:
                logger.warning("Encryption failed: %s", type(e).__name__)
                raise

        logger.debug("Encrypted value (%d ciphertext bytes)", len(envelope.ciphertext))
        return envelope.to_text()

    def decrypt(
        self,
        encoded: str,
        secret: str,
        config: Optional[StoreCryptConfig] = None,
    ) -> str:
        """
        Decrypt an encoded string with a secret.

        Args:
            encoded: String produced by encrypt()
            secret: The secret used for encryption
            config: Configuration for size limits (global instance by default)

        Returns:
            The original plaintext

        Raises:
            ValidationError: If the secret is empty
            FormatError: If the value is not in the AES256 format or too large
            IntegrityError: If the secret is wrong or the data was tampered with
            EncodingError: If decrypted bytes are not valid UTF-8
        """
        config = config or StoreCryptConfig.get_instance()
        validate_secret(secret)
        envelope = EncryptionEnvelope.from_text(
            encoded, max_plaintext_bytes=config.crypto.max_plaintext_bytes
        )

        key = derive_key(secret, envelope.salt)
        with ZeroizeContext(key):
            try:
                plaintext = AesGcmCipher().decrypt(envelope, key)
            except StoreCryptError as e:
                logger.warning("Decryption failed: %s", type(e).__name__)
                raise

        logger.debug("Decrypted value (%d ciphertext bytes)", len(envelope.ciphertext))
        return plaintext


_engine = TextCryptoEngine()


def encrypt(plaintext: str, secret: str) -> str:
    """Encrypt plaintext with secret; see TextCryptoEngine.encrypt."""
    return _engine.encrypt(plaintext, secret)


def decrypt(encoded: str, secret: str) -> str:
    """Decrypt an "AES256:" string with secret; see TextCryptoEngine.decrypt."""
    return _engine.decrypt(encoded, secret)
