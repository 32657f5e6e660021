"""Command: check that text is encryptable."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symcipher.commands._base import SymCommand

if TYPE_CHECKING:
    from symcipher.commands._context import AppContext


@click.command(
    cls=SymCommand,
    examples="""\
  symcipher validate "hello world"
  symcipher --json validate 'Hello!'""",
)
@click.argument("text")
@click.pass_obj
def validate(app: AppContext, text: str) -> None:
    """Check that TEXT uses only lowercase letters and spaces."""
    app.emit(app.service.validate(text))
