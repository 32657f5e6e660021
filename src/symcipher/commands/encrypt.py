"""Command: one-shot encryption with a random or manual key."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symcipher.commands._base import SymCommand
from symcipher.domain.types import EncryptionMethod

if TYPE_CHECKING:
    from symcipher.commands._context import AppContext
    from symcipher.services.result import ServiceResult

_ENCRYPT_EXAMPLES = """\
  symcipher encrypt cat --method manual --key 123
  symcipher encrypt "hello world" --method random
  symcipher --seed 7 --json encrypt "hello world" -m 1
  symcipher encrypt cat -m 0 -k 123 --status-line"""

_METHOD_CHOICES = ["manual", "random", "0", "1"]


def _report(app: AppContext, result: ServiceResult, status_line: bool) -> None:
    if not status_line:
        app.emit(result)
        return

    from symcipher.output.formatters import encode_status

    line = encode_status(result)
    if result.ok:
        click.echo(line)
    else:
        click.echo(line, err=True)
        raise SystemExit(1)


@click.command(cls=SymCommand, examples=_ENCRYPT_EXAMPLES)
@click.argument("text")
@click.option(
    "-m",
    "--method",
    type=click.Choice(_METHOD_CHOICES, case_sensitive=False),
    default=None,
    help="Key strategy: manual (0) or random (1).",
)
@click.option("-k", "--key", default=None, help="Manual key, one digit per character.")
@click.option(
    "--status-line",
    is_flag=True,
    help='Print the result as a "1: ..." / "0: ..." status line.',
)
@click.pass_obj
def encrypt(
    app: AppContext,
    text: str,
    method: str | None,
    key: str | None,
    status_line: bool,
) -> None:
    """Encrypt TEXT (lowercase letters and spaces only)."""
    # Reject bad text before prompting for anything else.
    checked = app.service.validate(text)
    if not checked.ok:
        _report(app, checked.model_copy(update={"op": "encrypt"}), status_line)
        return

    if method is None:
        if key is not None:
            method = "manual"
        elif app.interactive:
            method = click.prompt(
                "Method",
                type=click.Choice(_METHOD_CHOICES, case_sensitive=False),
                default="random",
            )
        else:
            method = "random"

    resolved = EncryptionMethod.parse(method)
    if key is not None and resolved is EncryptionMethod.RANDOM:
        raise click.UsageError("--key cannot be combined with the random method.")

    manual = resolved is EncryptionMethod.MANUAL
    if manual and key is None and app.interactive:
        key = click.prompt("Enter key", default="", show_default=False) or None

    _report(app, app.service.encrypt(text, method, key), status_line)
