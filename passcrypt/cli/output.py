"""Rich output helpers: options table and error display."""

from __future__ import annotations

from typing import Any, NoReturn

from rich.console import Console
from rich.table import Table
from rich.text import Text

from passcrypt.core.defaults import DEFAULT_IV
from passcrypt.core.exceptions import (
    CipherError,
    ConfigurationError,
    EncodingError,
    InputError,
    PasscryptError,
)
from passcrypt.schemas.options import CipherOptions

console = Console()
err_console = Console(stderr=True)

_EXIT_CODES: dict[type[PasscryptError], int] = {
    ConfigurationError: 2,
    InputError: 2,
    EncodingError: 1,
    CipherError: 1,
}


def exit_code_for(exc: PasscryptError) -> int:
    for kind, code in _EXIT_CODES.items():
        if isinstance(exc, kind):
            return code
    return 1


def fail(exc: PasscryptError) -> NoReturn:
    """Print *exc* to stderr and exit with the code for its error kind."""
    err_console.print(f"[red]{type(exc).__name__}:[/red] {exc}", highlight=False)
    raise SystemExit(exit_code_for(exc))


def _value_text(value: Any, fallback: str) -> Text:
    if value in (None, ""):
        return Text(fallback, style="yellow")
    return Text(str(value))


def options_table(options: CipherOptions) -> Table:
    data = options.masked()
    table = Table(
        title="Effective cipher options",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
        show_lines=False,
    )
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Value")

    table.add_row("passphrase", _value_text(data["passphrase"], "(empty, insecure)"))
    table.add_row("iv", _value_text(data["iv"], f"(fallback {DEFAULT_IV.hex()}, insecure)"))
    table.add_row("salt", _value_text(data["salt"], "(empty salt, insecure)"))
    table.add_row("iterations", str(data["iterations"]))
    table.add_row("desired_key_length", f"{data['desired_key_length']} bytes")
    table.add_row("hash_algorithm", options.hash_algorithm.display_name)
    return table
