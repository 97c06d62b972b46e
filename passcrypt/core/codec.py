"""Text and Base64 conversions wrapped around the raw cipher.

All conversions are strict: anything that cannot be converted raises
:class:`EncodingError` instead of being replaced or silently dropped.
"""

from __future__ import annotations

import base64

from passcrypt.core.defaults import PARAMETER_ENCODING, TEXT_ENCODING
from passcrypt.core.exceptions import EncodingError, InputError


def encode_text(text: str) -> bytes:
    """Encode plaintext or a passphrase as UTF-16LE."""
    if not isinstance(text, str):
        raise InputError(f"Expected text, got {type(text).__name__}")
    try:
        return text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        # lone surrogates cannot be represented
        raise EncodingError(f"Text is not encodable as {TEXT_ENCODING}: {exc.reason}") from exc


def decode_text(data: bytes) -> str:
    """Decode UTF-16LE bytes back into text."""
    try:
        return bytes(data).decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise EncodingError(f"Decrypted bytes are not valid {TEXT_ENCODING}: {exc.reason}") from exc


def encode_parameter(value: str, name: str) -> bytes:
    """Encode a configured salt or IV string, one byte per character."""
    try:
        return value.encode(PARAMETER_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(f"{name} must contain only ASCII characters") from exc


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_base64(text: str) -> bytes:
    """Decode standard, padded Base64, rejecting characters outside the alphabet."""
    if not isinstance(text, str):
        raise InputError(f"Expected Base64 text, got {type(text).__name__}")
    try:
        return base64.b64decode(text.strip(), validate=True)
    except ValueError as exc:
        # binascii.Error, or non-ASCII characters in the input
        raise EncodingError(f"Malformed Base64 input: {exc}") from exc
