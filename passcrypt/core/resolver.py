"""Turn CipherOptions into concrete derivation inputs and an IV."""

from __future__ import annotations

import structlog

from passcrypt.core.codec import encode_parameter, encode_text
from passcrypt.core.defaults import DEFAULT_IV, DEFAULT_SALT
from passcrypt.core.exceptions import InputError
from passcrypt.schemas.options import CipherOptions, DerivationParameters

logger = structlog.get_logger(__name__)


def resolve_parameters(options: CipherOptions) -> DerivationParameters:
    """Build fresh derivation parameters for one operation.

    Iterations, key length and hash algorithm are passed through unchecked;
    :func:`passcrypt.core.kdf.derive_key` rejects unusable values.
    """
    if options is None:
        raise InputError("Cipher options are required")
    if options.passphrase is None:
        raise InputError("A passphrase is required")

    if options.salt:
        salt = encode_parameter(options.salt, "salt")
    else:
        salt = DEFAULT_SALT
        logger.debug("No salt configured, deriving with an empty salt")

    return DerivationParameters(
        passphrase_bytes=encode_text(options.passphrase),
        salt_bytes=salt,
        iterations=options.iterations,
        desired_key_length=options.desired_key_length,
        hash_algorithm=options.hash_algorithm,
    )


def resolve_iv(iv: str | None) -> bytes:
    """Return the IV bytes for *iv*, or the fallback constant when unset.

    The length is not checked here; the cipher engine refuses anything
    other than 16 bytes.
    """
    if not iv:
        logger.warning("No IV configured, using the insecure fallback IV")
        return DEFAULT_IV
    return encode_parameter(iv, "iv")
