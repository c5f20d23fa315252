"""
StoreCrypt Memory Security Module
=================================

Best-effort wiping of derived keys.

WARNING:
- Python's memory model doesn't guarantee secure erasure
- For maximum security, consider native extensions
"""

from storecrypt.core.memory.zeroization import (
    ZeroizeContext,
    is_zeroed,
    secure_zero,
)

__all__ = [
    "ZeroizeContext",
    "is_zeroed",
    "secure_zero",
]
