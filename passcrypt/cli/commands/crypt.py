"""CLI commands for encrypting and decrypting."""

from __future__ import annotations

from typing import BinaryIO

import click

from passcrypt.cli.dependencies import get_cipher
from passcrypt.cli.output import err_console, fail
from passcrypt.core import codec
from passcrypt.core.exceptions import PasscryptError


def _exactly_one(**sources: object) -> None:
    given = [name for name, value in sources.items() if value is not None]
    if len(given) != 1:
        names = " or ".join(f"--{name.replace('_', '-')}" for name in sources)
        raise click.UsageError(f"Provide exactly one of {names}")


@click.command("encrypt")
@click.option("--text", default=None, help="Plaintext to encrypt (encoded as UTF-16LE)")
@click.option(
    "--in-file",
    type=click.File("rb"),
    default=None,
    help="Encrypt the raw bytes of this file ('-' for stdin)",
)
@click.option(
    "--out-file",
    type=click.File("wb"),
    default=None,
    help="Write raw ciphertext here instead of printing Base64",
)
@click.pass_context
def encrypt_cmd(
    ctx: click.Context,
    text: str | None,
    in_file: BinaryIO | None,
    out_file: BinaryIO | None,
) -> None:
    """Encrypt text or a file.

    Example:

        passcrypt --passphrase s3cret encrypt --text "Hello world"
    """
    _exactly_one(text=text, in_file=in_file)

    try:
        cipher = get_cipher(ctx)
        if text is not None:
            ciphertext = cipher.encrypt_text(text)
            if out_file is not None:
                out_file.write(ciphertext)
            else:
                click.echo(codec.to_base64(ciphertext))
            return

        if out_file is not None:
            with cipher.engine() as engine:
                written = engine.encrypt_stream(in_file, out_file)
            err_console.print(f"[green]Encrypted[/green] {written} bytes", highlight=False)
        else:
            click.echo(codec.to_base64(cipher.encrypt_bytes(in_file.read())))
    except PasscryptError as exc:
        fail(exc)


@click.command("decrypt")
@click.option("--data", default=None, help="Base64 ciphertext to decrypt")
@click.option(
    "--in-file",
    type=click.File("rb"),
    default=None,
    help="Decrypt raw ciphertext from this file ('-' for stdin)",
)
@click.option(
    "--out-file",
    type=click.File("wb"),
    default=None,
    help="Write raw plaintext bytes here instead of printing text",
)
@click.pass_context
def decrypt_cmd(
    ctx: click.Context,
    data: str | None,
    in_file: BinaryIO | None,
    out_file: BinaryIO | None,
) -> None:
    """Decrypt Base64 text or a ciphertext file.

    Without --out-file the plaintext is decoded as UTF-16LE text and printed.
    """
    _exactly_one(data=data, in_file=in_file)

    try:
        cipher = get_cipher(ctx)
        if data is not None:
            if out_file is None:
                click.echo(cipher.decrypt_from_base64(data))
                return
            out_file.write(cipher.decrypt_bytes(codec.from_base64(data)))
            return

        if out_file is not None:
            with cipher.engine() as engine:
                written = engine.decrypt_stream(in_file, out_file)
            err_console.print(f"[green]Decrypted[/green] {written} bytes", highlight=False)
        else:
            click.echo(cipher.decrypt_to_text(in_file.read()))
    except PasscryptError as exc:
        fail(exc)
