"""Fallback values used when the configuration leaves a field unset.

The IV and salt fallbacks are NOT secure. They exist so a zero-config
setup works and stays wire-compatible with ciphertexts produced under the
default configuration; production deployments must set both.
"""

from __future__ import annotations

# 16 bytes; the literal byte values, not a hex string
DEFAULT_IV = bytes(
    [
        0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08,
        0x09, 0x10, 0x11, 0x12, 0x13, 0x14, 0x15, 0x16,
    ]
)

# Unset salt means no salt at all, unlike the IV which has a constant
DEFAULT_SALT = b""

DEFAULT_ITERATIONS = 1000
DEFAULT_KEY_LENGTH = 16  # bytes → AES-128

# Passphrases and plaintext text use two bytes per character
TEXT_ENCODING = "utf-16-le"
# Salt and IV strings map one character to one byte
PARAMETER_ENCODING = "ascii"

AES_BLOCK_SIZE = 16  # bytes
AES_KEY_SIZES = (16, 24, 32)

# Zero-config options, mirroring the registration default of the service
DEFAULT_PASSPHRASE = "123456"
DEFAULT_CONFIGURED_IV = "abcede0123456789"
