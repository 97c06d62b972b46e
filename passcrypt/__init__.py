"""Passphrase-based AES-CBC encryption."""

from passcrypt.core.cipher import SymmetricCipher, create_cipher, default_options
from passcrypt.core.engine import AesCbcEngine
from passcrypt.core.exceptions import (
    CipherError,
    ConfigurationError,
    EncodingError,
    InputError,
    PasscryptError,
)
from passcrypt.core.kdf import derive_key
from passcrypt.schemas.options import CipherOptions, DerivationParameters, HashAlgorithm

__all__ = [
    "AesCbcEngine", "CipherError", "CipherOptions", "ConfigurationError",
    "DerivationParameters", "EncodingError", "HashAlgorithm", "InputError",
    "PasscryptError", "SymmetricCipher", "create_cipher", "default_options",
    "derive_key",
]
