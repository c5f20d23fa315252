"""
Stored Value Encryption
=======================

Helpers a key/value persistence layer calls when writing and reading values.

Every call carries an optional secret:
    - secret given: values are encrypted on write, decrypted on read
    - secret None:  values are stored and returned unchanged

Reads tolerate values written before encryption was enabled: anything
without the "AES256:" prefix is returned as-is. A prefixed value that fails
to decrypt is an error, never silently returned.
"""

from __future__ import annotations

from typing import Iterable, Optional

from storecrypt.core.crypto.engine import decrypt, encrypt
from storecrypt.core.crypto.envelope import is_encrypted
from storecrypt.core.errors import ItemDecryptionError, StoreCryptError


def seal_value(value: str, secret: Optional[str]) -> str:
    """
    Prepare a value for storage.

    Args:
        value: Value to store
        secret: Secret to encrypt with, or None to store in the clear

    Returns:
        The encoded ciphertext, or the value unchanged when secret is None
    """
    if secret is None:
        return value
    return encrypt(value, secret)


def open_value(value: Optional[str], secret: Optional[str]) -> Optional[str]:
    """
    Recover a value read from storage.

    Args:
        value: Stored value (None for a missing key)
        secret: Secret to decrypt with, or None

    Returns:
        The plaintext, or the stored value when it is not encrypted
        or no secret was given

    Raises:
        StoreCryptError: If an encrypted value cannot be decrypted
    """
    if value is None or secret is None or not is_encrypted(value):
        return value
    return decrypt(value, secret)


def seal_items(
    pairs: Iterable[tuple[str, str]],
    secret: Optional[str],
) -> list[tuple[str, str]]:
    """Seal each (key, value) pair for a batch write, preserving order."""
    return [(key, seal_value(value, secret)) for key, value in pairs]


def open_items(
    pairs: Iterable[tuple[str, Optional[str]]],
    secret: Optional[str],
) -> list[tuple[str, Optional[str]]]:
    """
    Open each (key, value) pair from a batch read, preserving order.

    Raises:
        ItemDecryptionError: On the first item that fails, naming its key
    """
    opened: list[tuple[str, Optional[str]]] = []
    for key, value in pairs:
        try:
            opened.append((key, open_value(value, secret)))
        except StoreCryptError as e:
            raise ItemDecryptionError(key, type(e).__name__) from e
    return opened
