"""Schemas for cipher configuration and per-call derivation parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from passcrypt.core.defaults import DEFAULT_ITERATIONS, DEFAULT_KEY_LENGTH
from passcrypt.core.exceptions import ConfigurationError


class HashAlgorithm(str, Enum):
    SHA1 = "SHA1"        # legacy compatibility only
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @classmethod
    def _missing_(cls, value: object) -> "HashAlgorithm | None":
        # sha384, SHA-384 and SHA_384 all name the same member
        if isinstance(value, str):
            normalised = value.strip().upper().replace("-", "").replace("_", "")
            for member in cls:
                if member.value == normalised:
                    return member
        return None

    @property
    def display_name(self) -> str:
        """Name in ``SHA-384`` form."""
        return f"SHA-{self.value[3:]}"


class CipherOptions(BaseModel):
    """Configuration consumed by :class:`passcrypt.core.cipher.SymmetricCipher`.

    Owned by the caller; the pipeline only reads it. ``passphrase`` has no
    default and must be set before any operation runs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    passphrase: str | None = None
    iv: str | None = None
    salt: str | None = None
    iterations: int = DEFAULT_ITERATIONS
    desired_key_length: int = DEFAULT_KEY_LENGTH
    # sha384 and SHA-384 are coerced through HashAlgorithm._missing_
    hash_algorithm: HashAlgorithm = HashAlgorithm.SHA384

    @classmethod
    def build(cls, **values: Any) -> "CipherOptions":
        """Validate *values*, raising :class:`ConfigurationError` on failure."""
        try:
            return cls(**values)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in exc.errors()
            )
            raise ConfigurationError(f"Invalid cipher options: {fields}") from exc

    def masked(self) -> dict[str, Any]:
        """Return the options as a dict with the passphrase hidden."""
        data = self.model_dump(mode="json")
        if data["passphrase"]:
            data["passphrase"] = "*" * 8
        return data


@dataclass(frozen=True)
class DerivationParameters:
    passphrase_bytes: bytes = field(repr=False)
    salt_bytes: bytes
    iterations: int
    desired_key_length: int
    hash_algorithm: HashAlgorithm

    @property
    def hash_algorithm_name(self) -> str:
        return self.hash_algorithm.display_name
