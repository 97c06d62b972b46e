"""Error taxonomy for the encryption pipeline.

Callers can tell apart misconfiguration, transport/encoding corruption,
wrong credentials or corrupted data, and missing arguments::

    PasscryptError
    ├── ConfigurationError
    ├── EncodingError
    ├── CipherError
    └── InputError
"""

from __future__ import annotations


class PasscryptError(Exception):
    """Base class for every error raised by passcrypt."""


class ConfigurationError(PasscryptError):
    """Invalid iteration count, key length, hash algorithm, key or IV size."""


class EncodingError(PasscryptError):
    """Text could not be converted to bytes (or back), or Base64 is malformed."""


class CipherError(PasscryptError):
    """Decryption failed (padding, block alignment, empty input) or the primitive failed."""


class InputError(PasscryptError):
    """A required argument is missing or has the wrong type."""
