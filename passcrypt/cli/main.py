"""passcrypt CLI entry point — `passcrypt` command group."""

from __future__ import annotations

import click

from passcrypt.cli.commands.config import config_cmd
from passcrypt.cli.commands.crypt import decrypt_cmd, encrypt_cmd
from passcrypt.cli.output import fail
from passcrypt.core.config import get_settings
from passcrypt.core.exceptions import PasscryptError
from passcrypt.core.logging import configure_logging
from passcrypt.schemas.options import HashAlgorithm


@click.group()
@click.version_option(package_name="passcrypt")
@click.option("--passphrase", default=None, help="Passphrase (overrides PASSCRYPT_PASSPHRASE)")
@click.option("--iv", default=None, help="16 ASCII characters (overrides PASSCRYPT_IV)")
@click.option("--salt", default=None, help="ASCII salt (overrides PASSCRYPT_SALT)")
@click.option("--iterations", type=int, default=None, help="PBKDF2 iteration count")
@click.option("--key-length", type=int, default=None, help="Derived key length in bytes")
@click.option(
    "--hash",
    "hash_algorithm",
    type=click.Choice([h.value for h in HashAlgorithm], case_sensitive=False),
    default=None,
    help="PBKDF2 hash algorithm",
)
@click.pass_context
def cli(
    ctx: click.Context,
    passphrase: str | None,
    iv: str | None,
    salt: str | None,
    iterations: int | None,
    key_length: int | None,
    hash_algorithm: str | None,
) -> None:
    """passcrypt — encrypt text and files with a passphrase (PBKDF2 + AES-CBC).

    \b
    Quick start:
      export PASSCRYPT_PASSPHRASE=... PASSCRYPT_IV=... PASSCRYPT_SALT=...
      passcrypt encrypt --text "Hello world"
      passcrypt decrypt --data <base64>
      passcrypt config show

    Ciphertext carries no IV or salt: decrypt with the same options.
    """
    try:
        settings = get_settings()
    except PasscryptError as exc:
        fail(exc)
    configure_logging(settings.log_level, debug=settings.debug)

    overrides = {
        "passphrase": passphrase,
        "iv": iv,
        "salt": salt,
        "iterations": iterations,
        "desired_key_length": key_length,
        "hash_algorithm": hash_algorithm,
    }
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {k: v for k, v in overrides.items() if v is not None}


# Register sub-commands
cli.add_command(encrypt_cmd)
cli.add_command(decrypt_cmd)
cli.add_command(config_cmd)


if __name__ == "__main__":
    cli()
