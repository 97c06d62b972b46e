"""PBKDF2-HMAC key derivation."""

from __future__ import annotations

import structlog
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from passcrypt.core.exceptions import ConfigurationError
from passcrypt.schemas.options import DerivationParameters, HashAlgorithm

logger = structlog.get_logger(__name__)

# Every HashAlgorithm member must appear here
_HASH_PRIMITIVES: dict[HashAlgorithm, type[hashes.HashAlgorithm]] = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}


def hash_primitive(algorithm: HashAlgorithm | str) -> hashes.HashAlgorithm:
    """Map a configured hash algorithm to its ``cryptography`` primitive."""
    try:
        algorithm = HashAlgorithm(algorithm)
    except ValueError:
        raise ConfigurationError(f"Unsupported hash algorithm: {algorithm!r}") from None

    primitive = _HASH_PRIMITIVES.get(algorithm)
    if primitive is None:
        raise ConfigurationError(f"No primitive registered for {algorithm.value}")
    return primitive()


def derive_key(
    passphrase_bytes: bytes,
    salt_bytes: bytes,
    iterations: int,
    desired_key_length: int,
    hash_algorithm: HashAlgorithm | str,
) -> bytes:
    """Stretch *passphrase_bytes* into a key of exactly *desired_key_length* bytes.

    Deterministic: the same inputs always produce the same key.

    Raises:
        ConfigurationError: non-positive iterations or key length, or an
            unknown hash algorithm.
    """
    if not isinstance(iterations, int) or iterations <= 0:
        raise ConfigurationError(f"Iteration count must be a positive integer, got {iterations!r}")
    if not isinstance(desired_key_length, int) or desired_key_length <= 0:
        raise ConfigurationError(
            f"Key length must be a positive number of bytes, got {desired_key_length!r}"
        )
    algorithm = hash_primitive(hash_algorithm)

    try:
        kdf = PBKDF2HMAC(
            algorithm=algorithm,
            length=desired_key_length,
            salt=salt_bytes,
            iterations=iterations,
        )
    except ValueError as exc:
        raise ConfigurationError(f"Invalid key derivation parameters: {exc}") from exc

    logger.debug(
        "Deriving key",
        hash=algorithm.name,
        iterations=iterations,
        key_length=desired_key_length,
        salted=bool(salt_bytes),
    )
    return kdf.derive(passphrase_bytes)


def derive_from_parameters(params: DerivationParameters) -> bytes:
    return derive_key(
        params.passphrase_bytes,
        params.salt_bytes,
        params.iterations,
        params.desired_key_length,
        params.hash_algorithm,
    )
