"""
Validation Utilities
====================

Input validation for the encryption entry points.
"""

from __future__ import annotations

from typing import Optional

from storecrypt.core.errors import ValidationError


def validate_secret(secret: str, field_name: str = "secret") -> str:
    """
    Validate a caller-supplied secret.

    Args:
        secret: The secret to validate
        field_name: Name used in error messages

    Returns:
        The secret, unchanged

    Raises:
        ValidationError: If the secret is not a non-empty, UTF-8 encodable string

    Security:
        The secret value itself never appears in the error message.
    """
    if not isinstance(secret, str):
        raise ValidationError(f"{field_name} must be a string")

    if not secret:
        raise ValidationError(f"{field_name} cannot be empty")

    try:
        secret.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(f"{field_name} is not valid UTF-8 text") from None

    return secret


def validate_plaintext(
    plaintext: str,
    max_bytes: Optional[int] = None,
    field_name: str = "plaintext",
) -> str:
    """
    Validate a plaintext value before encryption.

    Empty strings are allowed. Only the type and the UTF-8 size are checked;
    encodability is reported by the cipher as an EncryptionError.

    Args:
        plaintext: The value to encrypt
        max_bytes: Upper bound on the UTF-8 size, if any
        field_name: Name used in error messages

    Returns:
        The plaintext, unchanged

    Raises:
        ValidationError: If the value is not a string or is too large
    """
    if not isinstance(plaintext, str):
        raise ValidationError(f"{field_name} must be a string")

    # Each code point is at most 4 bytes in UTF-8; skip the exact count
    # for strings that cannot exceed the limit.
    if max_bytes is not None and len(plaintext) * 4 > max_bytes:
        size = len(plaintext.encode("utf-8", errors="surrogatepass"))
        if size > max_bytes:
            raise ValidationError(
                f"{field_name} must be at most {max_bytes} bytes"
            )

    return plaintext
