"""
Storage adapters - value-level helpers for persistence layers.
"""

from storecrypt.storage.values import open_items, open_value, seal_items, seal_value

__all__ = [
    "open_items",
    "open_value",
    "seal_items",
    "seal_value",
]
