"""
Encryption Envelope
===================

The self-describing record produced by encryption, and its text encoding.

Binary layout (fixed field lengths, no separators):
    NONCE (12) | SALT (16) | CIPHERTEXT (n) | TAG (16)

Text encoding:
    "AES256:" + base64(binary layout)

The prefix identifies both the algorithm family and the format version.
Any change to a field length, the KDF parameters or the cipher requires a
new prefix so old and new values stay distinguishable.
"""

from __future__ import annotations

import binascii
from base64 import b64decode, b64encode
from dataclasses import dataclass
from typing import Optional

from storecrypt.core.crypto.constants import (
    AES_NONCE_SIZE,
    AES_TAG_SIZE,
    MIN_ENVELOPE_SIZE,
    PREFIX,
    PREFIX_BYTES,
    SALT_SIZE,
)
from storecrypt.core.errors import FormatError


@dataclass(frozen=True, slots=True)
class EncryptionEnvelope:
    """
    Immutable container for one encrypted value.

    Contains all data needed for decryption except the secret.

    Attributes:
        nonce: Random GCM nonce, unique per encryption
        salt: Random KDF salt, unique per encryption
        ciphertext: Encrypted UTF-8 plaintext (same length as the plaintext bytes)
        tag: GCM authentication tag
    """

    nonce: bytes
    salt: bytes
    ciphertext: bytes
    tag: bytes

    def __post_init__(self) -> None:
        if len(self.nonce) != AES_NONCE_SIZE:
            raise FormatError(f"Nonce must be exactly {AES_NONCE_SIZE} bytes")
        if len(self.salt) != SALT_SIZE:
            raise FormatError(f"Salt must be exactly {SALT_SIZE} bytes")
        if len(self.tag) != AES_TAG_SIZE:
            raise FormatError(f"Tag must be exactly {AES_TAG_SIZE} bytes")

    @property
    def associated_data(self) -> bytes:
        """Bytes authenticated alongside the ciphertext."""
        return associated_data(self.salt)

    def to_bytes(self) -> bytes:
        """Serialize the envelope to its binary layout."""
        return b"".join([self.nonce, self.salt, self.ciphertext, self.tag])

    @classmethod
    def from_bytes(cls, data: bytes) -> "EncryptionEnvelope":
        """
        Deserialize an envelope from its binary layout.

        Raises:
            FormatError: If data is shorter than the minimum envelope size
        """
        if len(data) < MIN_ENVELOPE_SIZE:
            raise FormatError(
                f"Envelope too short: expected at least {MIN_ENVELOPE_SIZE} bytes"
            )

        offset = 0
        nonce = data[offset : offset + AES_NONCE_SIZE]
        offset += AES_NONCE_SIZE
        salt = data[offset : offset + SALT_SIZE]
        offset += SALT_SIZE
        ciphertext = data[offset : len(data) - AES_TAG_SIZE]
        tag = data[len(data) - AES_TAG_SIZE :]

        return cls(
            nonce=bytes(nonce),
            salt=bytes(salt),
            ciphertext=bytes(ciphertext),
            tag=bytes(tag),
        )

    def to_text(self) -> str:
        """Encode as a prefixed base64 string."""
        return PREFIX + b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_text(
        cls,
        text: str,
        max_plaintext_bytes: Optional[int] = None,
    ) -> "EncryptionEnvelope":
        """
        Decode a prefixed base64 string.

        Only the canonical encoding produced by to_text() is accepted, so
        every character of the payload is significant.

        Args:
            text: The encoded value
            max_plaintext_bytes: Reject payloads that could not come from a
                plaintext of at most this many bytes (no limit when None)

        Raises:
            FormatError: If the prefix is missing, the payload is malformed
                or longer than the limit allows
        """
        if not isinstance(text, str):
            raise FormatError("Encoded value must be a string")
        if not text.startswith(PREFIX):
            raise FormatError("Value is not encrypted with the AES256 format")

        payload = text[len(PREFIX) :]
        if (
            max_plaintext_bytes is not None
            and len(payload) > encoded_length(max_plaintext_bytes + MIN_ENVELOPE_SIZE)
        ):
            raise FormatError("Encrypted payload exceeds the maximum size")

        try:
            data = b64decode(payload.encode("ascii"), validate=True)
        except (UnicodeEncodeError, binascii.Error):
            raise FormatError("Encrypted payload is not valid base64") from None

        # b64decode ignores the unused low bits before padding
        if b64encode(data).decode("ascii") != payload:
            raise FormatError("Encrypted payload is not valid base64")

        return cls.from_bytes(data)

    def __repr__(self) -> str:
        """Safe representation."""
        return f"EncryptionEnvelope(ciphertext_len={len(self.ciphertext)})"


def associated_data(salt: bytes) -> bytes:
    """Format prefix and KDF salt, bound to the ciphertext as GCM AAD."""
    return PREFIX_BYTES + salt


def encoded_length(size: int) -> int:
    """Length of the padded base64 text for size bytes."""
    return 4 * ((size + 2) // 3)


def encode(envelope: EncryptionEnvelope) -> str:
    """Encode an envelope as "AES256:" + base64."""
    return envelope.to_text()


def decode(text: str) -> EncryptionEnvelope:
    """Decode a prefixed string back into an envelope."""
    return EncryptionEnvelope.from_text(text)


def is_encrypted(text: object) -> bool:
    """Check whether a stored value carries this format's prefix."""
    return isinstance(text, str) and text.startswith(PREFIX)
