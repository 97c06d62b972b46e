"""Application configuration via Pydantic BaseSettings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passcrypt.core.defaults import DEFAULT_ITERATIONS, DEFAULT_KEY_LENGTH
from passcrypt.core.exceptions import ConfigurationError
from passcrypt.schemas.options import CipherOptions, HashAlgorithm

_log = logging.getLogger(__name__)

# Below this the derivation is cheap enough to brute-force offline
_MIN_RECOMMENDED_ITERATIONS = 100_000


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSCRYPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Key derivation
    passphrase: str = Field(default="", description="Secret passphrase for PBKDF2")
    salt: str | None = Field(
        default=None,
        description="ASCII salt; unset means an empty salt",
    )
    iterations: int = Field(default=DEFAULT_ITERATIONS)
    desired_key_length: int = Field(default=DEFAULT_KEY_LENGTH, description="Key size in bytes")
    hash_algorithm: str = Field(default=HashAlgorithm.SHA384.value)

    # Cipher
    iv: str | None = Field(
        default=None,
        description="16 ASCII characters; unset means the built-in fallback IV",
    )

    # Application
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    def to_options(self) -> CipherOptions:
        """Build validated cipher options from these settings."""
        return CipherOptions.build(
            passphrase=self.passphrase,
            iv=self.iv or None,
            salt=self.salt or None,
            iterations=self.iterations,
            desired_key_length=self.desired_key_length,
            hash_algorithm=self.hash_algorithm,
        )

    @model_validator(mode="after")
    def _warn_insecure_defaults(self) -> "Settings":
        """Emit a warning when insecure fallback values are in effect."""
        if not self.debug:
            if not self.passphrase:
                _log.warning("Empty passphrase configured, set PASSCRYPT_PASSPHRASE!")
            if not self.iv:
                _log.warning("No IV configured, the built-in fallback IV is insecure")
            if not self.salt:
                _log.warning("No salt configured, keys are derived without a salt")
            if self.iterations < _MIN_RECOMMENDED_ITERATIONS:
                _log.warning(
                    "PBKDF2 iteration count %d is below the recommended %d",
                    self.iterations,
                    _MIN_RECOMMENDED_ITERATIONS,
                )
        return self


@lru_cache
def get_settings() -> Settings:
    """Load settings once; invalid PASSCRYPT_* values raise ConfigurationError."""
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid settings: {fields}") from exc
