"""AES-CBC cipher engine with PKCS#7 padding.

Data is processed in fixed-size chunks so file-like sources can be
encrypted without holding the whole plaintext in memory. The in-memory
``encrypt``/``decrypt`` helpers run through the same chunked path.

The IV is supplied by the caller, never generated, so the output is fully
deterministic for a given key, IV and plaintext.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import BinaryIO

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from passcrypt.core.defaults import AES_BLOCK_SIZE, AES_KEY_SIZES
from passcrypt.core.exceptions import CipherError, ConfigurationError

CHUNK_SIZE = 64 * 1024


def _iter_buffer(data: bytes) -> Iterator[memoryview]:
    view = memoryview(data)
    for offset in range(0, len(view), CHUNK_SIZE):
        yield view[offset:offset + CHUNK_SIZE]


def _iter_stream(source: BinaryIO) -> Iterator[bytes]:
    return iter(lambda: source.read(CHUNK_SIZE), b"")


class AesCbcEngine:
    """AES-128/192/256 in CBC mode over a fixed key and IV.

    Usage:
        engine = AesCbcEngine(key, iv)
        ciphertext = engine.encrypt(b"payload")
        assert engine.decrypt(ciphertext) == b"payload"
    """

    def __init__(self, key: bytes | bytearray, iv: bytes | bytearray) -> None:
        if len(key) not in AES_KEY_SIZES:
            raise ConfigurationError(
                f"AES key must be 16, 24 or 32 bytes, got {len(key)}"
            )
        if len(iv) != AES_BLOCK_SIZE:
            raise ConfigurationError(f"IV must be {AES_BLOCK_SIZE} bytes, got {len(iv)}")
        self._cipher = Cipher(algorithms.AES(key), modes.CBC(iv))

    # ── In-memory ────────────────────────────────────────────────────────────

    def encrypt(self, plaintext: bytes) -> bytes:
        return b"".join(self._encrypt_chunks(_iter_buffer(plaintext)))

    def decrypt(self, ciphertext: bytes) -> bytes:
        return b"".join(self._decrypt_chunks(_iter_buffer(ciphertext)))

    # ── Streams ──────────────────────────────────────────────────────────────

    def encrypt_stream(self, source: BinaryIO, sink: BinaryIO) -> int:
        """Encrypt *source* into *sink*; return the number of bytes written."""
        written = 0
        for block in self._encrypt_chunks(_iter_stream(source)):
            sink.write(block)
            written += len(block)
        return written

    def decrypt_stream(self, source: BinaryIO, sink: BinaryIO) -> int:
        """Decrypt *source* into *sink*; return the number of bytes written.

        Padding is only verified at the end, so *sink* may already hold
        partial output when :class:`CipherError` is raised.
        """
        written = 0
        for block in self._decrypt_chunks(_iter_stream(source)):
            sink.write(block)
            written += len(block)
        return written

    # ── Internals ────────────────────────────────────────────────────────────

    def _encrypt_chunks(self, chunks: Iterable[bytes | memoryview]) -> Iterator[bytes]:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        encryptor = self._cipher.encryptor()
        try:
            for chunk in chunks:
                out = encryptor.update(padder.update(chunk))
                if out:
                    yield out
            yield encryptor.update(padder.finalize()) + encryptor.finalize()
        except ValueError as exc:
            raise CipherError(f"Encryption failed: {exc}") from exc

    def _decrypt_chunks(self, chunks: Iterable[bytes | memoryview]) -> Iterator[bytes]:
        decryptor = self._cipher.decryptor()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        total = 0
        for chunk in chunks:
            total += len(chunk)
            out = unpadder.update(decryptor.update(chunk))
            if out:
                yield out

        if total == 0:
            raise CipherError("Ciphertext is empty")
        if total % AES_BLOCK_SIZE:
            raise CipherError(
                f"Ciphertext length {total} is not a multiple of the "
                f"{AES_BLOCK_SIZE}-byte block size (truncated or corrupted)"
            )
        try:
            tail = unpadder.update(decryptor.finalize()) + unpadder.finalize()
        except ValueError as exc:
            raise CipherError(
                "Invalid padding: wrong passphrase, IV or salt, or corrupted ciphertext"
            ) from exc
        yield tail
