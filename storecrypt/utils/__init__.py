"""
Utils module - Utility functions and helpers.
"""

from storecrypt.utils.validators import validate_plaintext, validate_secret

__all__ = [
    "validate_plaintext",
    "validate_secret",
]
