"""
Format Constants
================

Parameters of the "AES256:" wire format. Every stored value depends on
them; changing any one requires a new PREFIX.
"""

from typing import Final

# Format tag
PREFIX: Final[str] = "AES256:"
PREFIX_BYTES: Final[bytes] = PREFIX.encode("ascii")

# Cipher: AES-256-GCM
AES_KEY_SIZE: Final[int] = 32  # 256 bits
AES_NONCE_SIZE: Final[int] = 12  # 96 bits (NIST recommended for GCM)
AES_TAG_SIZE: Final[int] = 16  # 128 bits

# Key derivation: Argon2id (OWASP minimum profile)
ARGON2_TIME_COST: Final[int] = 2
ARGON2_MEMORY_COST: Final[int] = 19456  # 19 MiB
ARGON2_PARALLELISM: Final[int] = 1
SALT_SIZE: Final[int] = 16  # 128 bits

# Smallest valid envelope: empty plaintext
MIN_ENVELOPE_SIZE: Final[int] = AES_NONCE_SIZE + SALT_SIZE + AES_TAG_SIZE
