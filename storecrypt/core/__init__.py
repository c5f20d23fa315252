"""
Core module - Contains configuration, logging, errors and the crypto core.
"""

from storecrypt.core.config import StoreCryptConfig
from storecrypt.core.logging import SecureLogFilter, get_secure_logger

__all__ = ["StoreCryptConfig", "SecureLogFilter", "get_secure_logger"]
