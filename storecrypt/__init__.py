"""
StoreCrypt - Secret-Based Encryption for Stored Values
======================================================

Encrypts individual strings before a persistence layer writes them and
decrypts them on read.

    >>> from storecrypt import encrypt, decrypt
    >>> token = encrypt("hello world", "mySecret123")
    >>> decrypt(token, "mySecret123")
    'hello world'

Security Notice:
- No secrets are logged
- Fail-closed: tampered or mis-keyed values raise, never return data
- Format is versioned by its "AES256:" prefix
"""

from storecrypt.core.config import StoreCryptConfig
from storecrypt.core.crypto import (
    PREFIX,
    EncryptionEnvelope,
    TextCryptoEngine,
    decrypt,
    encrypt,
    is_encrypted,
)
from storecrypt.core.errors import (
    DecryptionError,
    EncodingError,
    EncryptionError,
    FormatError,
    IntegrityError,
    ItemDecryptionError,
    StoreCryptError,
    ValidationError,
)
from storecrypt.core.logging import get_secure_logger

__version__ = "0.1.0"

__all__ = [
    "DecryptionError",
    "EncodingError",
    "EncryptionError",
    "EncryptionEnvelope",
    "FormatError",
    "IntegrityError",
    "ItemDecryptionError",
    "PREFIX",
    "StoreCryptConfig",
    "StoreCryptError",
    "TextCryptoEngine",
    "ValidationError",
    "__version__",
    "decrypt",
    "encrypt",
    "get_secure_logger",
    "is_encrypted",
]
