"""Option and cipher providers shared by CLI commands."""

from __future__ import annotations

import click

from passcrypt.core.cipher import SymmetricCipher
from passcrypt.core.config import get_settings
from passcrypt.schemas.options import CipherOptions


def get_options(ctx: click.Context) -> CipherOptions:
    """Settings-derived options with the group's command-line overrides applied.

    Raises ConfigurationError when the merged values do not validate.
    """
    base = get_settings().to_options()
    overrides = ctx.obj.get("overrides", {}) if ctx.obj else {}
    if not overrides:
        return base
    return CipherOptions.build(**{**base.model_dump(), **overrides})


def get_cipher(ctx: click.Context) -> SymmetricCipher:
    return SymmetricCipher(get_options(ctx))
