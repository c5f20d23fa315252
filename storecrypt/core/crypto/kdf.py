"""
Key Derivation
==============

Turns a caller-supplied secret into a 256-bit AES key.

Construction (fixed constants of the AES256: format):
    Argon2id(secret_utf8, salt, t=2, m=19456 KiB, p=1, len=32)

The salt is random per encryption and stored inside the envelope, so the
same (secret, salt) pair always yields the same key at decrypt time.

WARNING:
    - Changing any constant in constants.py breaks every stored value
    - Returned keys are mutable buffers; zero them after use
"""

from __future__ import annotations

import secrets

from argon2.low_level import Type, hash_secret_raw

from storecrypt.core.crypto.constants import (
    AES_KEY_SIZE,
    ARGON2_MEMORY_COST,
    ARGON2_PARALLELISM,
    ARGON2_TIME_COST,
    SALT_SIZE,
)
from storecrypt.core.errors import ValidationError
from storecrypt.utils.validators import validate_secret


def generate_salt() -> bytes:
    """
    Generate a random KDF salt.

    Returns:
        16 bytes from the OS CSPRNG
    """
    return secrets.token_bytes(SALT_SIZE)


def derive_key(secret: str, salt: bytes) -> bytearray:
    """
    Derive an AES-256 key from a secret using Argon2id.

    Args:
        secret: Caller secret of any non-empty length
        salt: 16-byte salt (embedded in the envelope)

    Returns:
        32-byte key as a bytearray the caller must zero after use

    Raises:
        ValidationError: If the secret is empty or the salt has the wrong size

    Security:
        - Deterministic: same secret + salt = same key
        - Memory-hard, so short human secrets resist brute force
        - Nothing is retained after the call
    """
    validate_secret(secret)
    if len(salt) != SALT_SIZE:
        raise ValidationError(f"Salt must be exactly {SALT_SIZE} bytes")

    raw = hash_secret_raw(
        secret=secret.encode("utf-8"),
        salt=bytes(salt),
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST,
        parallelism=ARGON2_PARALLELISM,
        hash_len=AES_KEY_SIZE,
        type=Type.ID,
    )

    # Python cannot wipe the immutable bytes argon2 returned; the mutable
    # copy is what callers zero.
    return bytearray(raw)
