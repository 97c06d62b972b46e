"""pytest fixtures shared across all tests."""

from __future__ import annotations

import os

import pytest

from passcrypt.core.cipher import SymmetricCipher
from passcrypt.core.config import get_settings
from passcrypt.schemas.options import CipherOptions

# Shared configuration used across the suite
CLIENT_SETTINGS = {
    "passphrase": "0123456789",
    "iv": "abcede0123456789",
    "salt": "0123456789abcede",
    "iterations": 1000,
    "desired_key_length": 16,
    "hash_algorithm": "SHA512",
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep PASSCRYPT_* variables and any local .env out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("PASSCRYPT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def options() -> CipherOptions:
    return CipherOptions.build(**CLIENT_SETTINGS)


@pytest.fixture
def cipher(options) -> SymmetricCipher:
    return SymmetricCipher(options)
