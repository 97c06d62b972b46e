"""Password-based symmetric cipher service.

Every operation re-derives the key from the passphrase and wipes the key
and IV buffers once the call returns; no key material outlives a call::

    cipher = SymmetricCipher(CipherOptions(passphrase="s3cret", iv="abcede0123456789"))
    token = cipher.encrypt_to_base64("Hello world")
    assert cipher.decrypt_from_base64(token) == "Hello world"

Ciphertext carries no IV, salt or integrity tag. Decryption needs the same
options that were used to encrypt.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from passcrypt.core import codec
from passcrypt.core.config import Settings, get_settings
from passcrypt.core.defaults import DEFAULT_CONFIGURED_IV, DEFAULT_PASSPHRASE
from passcrypt.core.engine import AesCbcEngine
from passcrypt.core.exceptions import InputError
from passcrypt.core.kdf import derive_from_parameters
from passcrypt.core.logging import configure_logging
from passcrypt.core.resolver import resolve_iv, resolve_parameters
from passcrypt.schemas.options import CipherOptions

logger = structlog.get_logger(__name__)


def _wipe(buffer: bytearray) -> None:
    for i in range(len(buffer)):
        buffer[i] = 0


def _require_bytes(value: object, name: str) -> bytes:
    if value is None:
        raise InputError(f"{name} is required")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InputError(f"{name} must be bytes, got {type(value).__name__}")
    return value


def _require_text(value: object, name: str) -> str:
    if value is None:
        raise InputError(f"{name} is required")
    if not isinstance(value, str):
        raise InputError(f"{name} must be str, got {type(value).__name__}")
    return value


class SymmetricCipher:
    """AES-CBC encryption under a PBKDF2-derived key."""

    def __init__(self, options: CipherOptions) -> None:
        if options is None:
            raise InputError("Cipher options are required")
        self._options = options

    @property
    def options(self) -> CipherOptions:
        return self._options

    @contextmanager
    def engine(self) -> Iterator[AesCbcEngine]:
        """Yield an engine keyed for this call; key and IV are wiped on exit."""
        params = resolve_parameters(self._options)
        iv = bytearray(resolve_iv(self._options.iv))
        key = bytearray()
        try:
            key.extend(derive_from_parameters(params))
            yield AesCbcEngine(key, iv)
        finally:
            _wipe(key)
            _wipe(iv)

    # ── Bytes ────────────────────────────────────────────────────────────────

    def encrypt_bytes(self, plain: bytes) -> bytes:
        plain = _require_bytes(plain, "plaintext")
        with self.engine() as engine:
            ciphertext = engine.encrypt(plain)
        logger.debug("Encrypted payload", plaintext_size=len(plain), ciphertext_size=len(ciphertext))
        return ciphertext

    def decrypt_bytes(self, cipher: bytes) -> bytes:
        cipher = _require_bytes(cipher, "ciphertext")
        with self.engine() as engine:
            plaintext = engine.decrypt(cipher)
        logger.debug("Decrypted payload", ciphertext_size=len(cipher), plaintext_size=len(plaintext))
        return plaintext

    # ── Text ─────────────────────────────────────────────────────────────────

    def encrypt_text(self, plain: str) -> bytes:
        return self.encrypt_bytes(codec.encode_text(_require_text(plain, "plaintext")))

    def decrypt_to_text(self, cipher: bytes) -> str:
        return codec.decode_text(self.decrypt_bytes(cipher))

    # ── Base64 ───────────────────────────────────────────────────────────────

    def encrypt_to_base64(self, plain: str) -> str:
        return codec.to_base64(self.encrypt_text(plain))

    def decrypt_from_base64(self, encoded: str) -> str:
        # Malformed transport encoding fails before any key is derived
        cipher = codec.from_base64(_require_text(encoded, "ciphertext"))
        return self.decrypt_to_text(cipher)

    # ── Generic entry points ─────────────────────────────────────────────────

    def encrypt(self, data: bytes | str) -> bytes:
        """Encrypt bytes as-is, or text as UTF-16LE."""
        if isinstance(data, str):
            return self.encrypt_text(data)
        return self.encrypt_bytes(data)

    def decrypt(self, cipher: bytes) -> bytes:
        return self.decrypt_bytes(cipher)

    # ── Async wrappers ───────────────────────────────────────────────────────
    # CPU-bound work pushed to a thread; nothing here waits on I/O.

    async def encrypt_async(self, data: bytes | str) -> bytes:
        return await asyncio.to_thread(self.encrypt, data)

    async def encrypt_to_base64_async(self, plain: str) -> str:
        return await asyncio.to_thread(self.encrypt_to_base64, plain)

    async def decrypt_async(self, cipher: bytes) -> bytes:
        return await asyncio.to_thread(self.decrypt, cipher)

    async def decrypt_to_text_async(self, cipher: bytes) -> str:
        return await asyncio.to_thread(self.decrypt_to_text, cipher)

    async def decrypt_from_base64_async(self, encoded: str) -> str:
        return await asyncio.to_thread(self.decrypt_from_base64, encoded)


def default_options() -> CipherOptions:
    """Zero-config options. Not secure; for local development only."""
    return CipherOptions(passphrase=DEFAULT_PASSPHRASE, iv=DEFAULT_CONFIGURED_IV)


def create_cipher(settings: Settings | None = None) -> SymmetricCipher:
    """Build a cipher from application settings (environment / .env by default).

    Also configures logging from the same settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, debug=settings.debug)
    return SymmetricCipher(settings.to_options())
