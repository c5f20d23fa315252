"""
Memory Zeroization Utilities
============================

Explicit wiping of key buffers that live for a single encrypt/decrypt call.

Security Properties:
- Explicit zeroization (no GC reliance)
- Exception-safe cleanup via context manager

WARNING:
- Python's memory model doesn't guarantee secure erasure
- Immutable bytes (and library-internal copies) cannot be wiped
- These are best-effort mitigations
"""

from __future__ import annotations

import ctypes
from contextlib import contextmanager
from typing import Iterator


def secure_zero(data: bytearray | memoryview) -> None:
    """
    Securely zero a byte buffer.

    Uses ctypes memset on bytearrays, with Python-level zeroing
    for memoryviews.

    Args:
        data: Mutable byte buffer to zero

    Raises:
        TypeError: If the buffer is immutable (bytes)
    """
    if isinstance(data, bytes):
        raise TypeError("Cannot zero immutable bytes; use a bytearray")

    if len(data) == 0:
        return

    if isinstance(data, memoryview):
        data[:] = bytes(len(data))
        return

    addr = ctypes.addressof((ctypes.c_char * len(data)).from_buffer(data))
    ctypes.memset(addr, 0, len(data))


def is_zeroed(data: bytearray | memoryview) -> bool:
    """Check whether every byte of a buffer is zero."""
    return not any(data)


@contextmanager
def ZeroizeContext(*buffers: bytearray) -> Iterator[None]:
    """
    Context manager that zeroizes buffers on exit.

    Always zeroizes, whether exit is normal or exceptional.

    Usage:
        key = derive_key(secret, salt)

        with ZeroizeContext(key):
            envelope = cipher.encrypt(plaintext, key, salt)
        # key is now zeroed
    """
    try:
        yield
    finally:
        for buf in buffers:
            secure_zero(buf)
