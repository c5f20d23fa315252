"""
AES-256-GCM Text Cipher
=======================

Encrypts one UTF-8 string into an EncryptionEnvelope and back.

Security Properties:
    - 256-bit key (derived from the caller's secret)
    - 96-bit random nonce per encryption (NIST recommended)
    - 128-bit authentication tag
    - Format prefix and KDF salt bound as Associated Data

NIST SP 800-38D Compliance:
    - GCM mode with 96-bit IV
    - Unique nonce for each encryption under same key

WARNING:
    - Never reuse (key, nonce) pairs
    - Tag is verified before any plaintext is returned
"""

from __future__ import annotations

import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from storecrypt.core.crypto.constants import (
    AES_KEY_SIZE,
    AES_NONCE_SIZE,
    AES_TAG_SIZE,
    SALT_SIZE,
)
from storecrypt.core.crypto.envelope import EncryptionEnvelope, associated_data
from storecrypt.core.errors import (
    EncodingError,
    EncryptionError,
    IntegrityError,
    ValidationError,
)


class AesGcmCipher:
    """
    AES-256-GCM Authenticated Encryption for text values.

    Stateless: the key is passed on every call and never stored.

    Usage:
        cipher = AesGcmCipher()

        envelope = cipher.encrypt("hello", key=key, salt=salt)
        plaintext = cipher.decrypt(envelope, key=key)

    Security Notes:
        - Keys come from the KDF and are wiped by the caller
        - A failed tag check raises IntegrityError, never returns data
    """

    __slots__ = ()

    @staticmethod
    def generate_nonce() -> bytes:
        """
        Generate a cryptographically secure random nonce.

        Returns:
            12 bytes of cryptographic random data

        Security:
            96-bit nonces with random generation have negligible collision
            probability for up to 2^32 encryptions under same key.
        """
        return secrets.token_bytes(AES_NONCE_SIZE)

    @staticmethod
    def _check_key(key: bytes | bytearray) -> None:
        if len(key) != AES_KEY_SIZE:
            raise ValidationError(f"Key must be exactly {AES_KEY_SIZE} bytes")

    def encrypt(
        self,
        plaintext: str,
        key: bytes | bytearray,
        salt: bytes,
    ) -> EncryptionEnvelope:
        """
        Encrypt a string using AES-256-GCM.

        Args:
            plaintext: Text to encrypt (can be empty)
            key: 32-byte key derived from the secret and salt
            salt: The KDF salt, stored in the envelope and authenticated

        Returns:
            EncryptionEnvelope with nonce, salt, ciphertext and tag

        Raises:
            ValidationError: If key has the wrong size
            EncryptionError: If plaintext is not UTF-8 encodable
        """
        self._check_key(key)

        try:
            data = plaintext.encode("utf-8")
        except UnicodeEncodeError:
            raise EncryptionError("Plaintext is not UTF-8 encodable") from None

        if len(salt) != SALT_SIZE:
            raise ValidationError(f"Salt must be exactly {SALT_SIZE} bytes")

        nonce = self.generate_nonce()

        # AESGCM appends the tag to the ciphertext
        sealed = AESGCM(key).encrypt(nonce, data, associated_data(salt))

        return EncryptionEnvelope(
            nonce=nonce,
            salt=salt,
            ciphertext=sealed[:-AES_TAG_SIZE],
            tag=sealed[-AES_TAG_SIZE:],
        )

    def decrypt(
        self,
        envelope: EncryptionEnvelope,
        key: bytes | bytearray,
    ) -> str:
        """
        Decrypt an envelope using AES-256-GCM with integrity verification.

        Args:
            envelope: Envelope produced by encrypt()
            key: The 32-byte key derived from the secret and envelope salt

        Returns:
            Decrypted plaintext string

        Raises:
            ValidationError: If key has the wrong size
            IntegrityError: If authentication fails (tampering or wrong secret)
            EncodingError: If the decrypted bytes are not valid UTF-8
        """
        self._check_key(key)

        try:
            data = AESGCM(key).decrypt(
                envelope.nonce,
                envelope.ciphertext + envelope.tag,
                envelope.associated_data,
            )
        except InvalidTag:
            raise IntegrityError(
                "Authentication failed: wrong secret or tampered data"
            ) from None

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise EncodingError("Decrypted data is not valid UTF-8") from None
