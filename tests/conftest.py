"""Shared fixtures for StoreCrypt tests."""

import os

import pytest

from storecrypt.core.config import StoreCryptConfig


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Drop STORECRYPT_* overrides and the cached config around each test."""
    for name in list(os.environ):
        if name.startswith("STORECRYPT_"):
            monkeypatch.delenv(name)
    StoreCryptConfig.reset_instance()
    yield
    StoreCryptConfig.reset_instance()


@pytest.fixture
def secret() -> str:
    return "mySecret123"
