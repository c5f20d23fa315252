"""
StoreCrypt Cryptographic Core
=============================

Secret-based encryption of individual string values.

Architecture:
    1. Argon2id: key derivation from the caller's secret
    2. AES-256-GCM: authenticated encryption
    3. "AES256:" + base64 envelope: versioned text format

Security Properties:
    - All encryption is authenticated (AEAD)
    - Random salt and nonce per value
    - Keys exist only for the duration of one call
"""

from storecrypt.core.crypto.aes_gcm import AesGcmCipher
from storecrypt.core.crypto.constants import PREFIX
from storecrypt.core.crypto.engine import TextCryptoEngine, decrypt, encrypt
from storecrypt.core.crypto.envelope import (
    EncryptionEnvelope,
    decode,
    encode,
    is_encrypted,
)
from storecrypt.core.crypto.kdf import derive_key, generate_salt

__all__ = [
    "AesGcmCipher",
    "EncryptionEnvelope",
    "PREFIX",
    "TextCryptoEngine",
    "decode",
    "decrypt",
    "derive_key",
    "encode",
    "encrypt",
    "generate_salt",
    "is_encrypted",
]
