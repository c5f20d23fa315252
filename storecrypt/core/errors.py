"""
StoreCrypt Error Hierarchy
==========================

All failures raised by the encryption core derive from StoreCryptError.

Security Notes:
    - Messages never contain the secret, derived key, plaintext or ciphertext
    - Library exceptions are chained, not swallowed
"""

from __future__ import annotations


class StoreCryptError(Exception):
    """Base exception for all StoreCrypt failures."""
    pass


class ValidationError(StoreCryptError, ValueError):
    """Raised when a caller passes an invalid secret, plaintext or key size."""
    pass


class FormatError(StoreCryptError):
    """
    Raised when an encoded string is not in a recognized format.

    Prefix mismatch means the value was never encrypted with this scheme
    (or was produced by another format version). Callers should treat it
    as not encrypted rather than retry decryption.
    """
    pass


class EncryptionError(StoreCryptError):
    """Raised when plaintext cannot be encrypted (not UTF-8 encodable)."""
    pass


class DecryptionError(StoreCryptError):
    """Base class for failures while decrypting a well-formed envelope."""
    pass


class IntegrityError(DecryptionError):
    """
    Authentication tag mismatch.

    Either the envelope was tampered with or the secret is wrong.
    No plaintext is ever returned in this case.
    """
    pass


class EncodingError(DecryptionError):
    """Decrypted bytes are not valid UTF-8."""
    pass


class ItemDecryptionError(DecryptionError):
    """
    Raised by batch reads when one item fails to decrypt.

    Attributes:
        item_key: Storage key of the failing item (never its value)
    """

    def __init__(self, item_key: str, reason: str) -> None:
        super().__init__(f"Failed to decrypt item {item_key!r}: {reason}")
        self.item_key = item_key
