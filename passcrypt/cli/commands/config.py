"""CLI commands for inspecting configuration."""

from __future__ import annotations

import click

from passcrypt.cli.dependencies import get_options
from passcrypt.cli.output import console, fail, options_table
from passcrypt.core.exceptions import PasscryptError


@click.group("config")
def config_cmd() -> None:
    """Inspect the effective cipher configuration."""


@config_cmd.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the options encrypt/decrypt would use (passphrase masked)."""
    try:
        options = get_options(ctx)
    except PasscryptError as exc:
        fail(exc)
    console.print(options_table(options))
