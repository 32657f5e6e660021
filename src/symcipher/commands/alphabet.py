"""Command: list the cipher alphabet."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symcipher.commands._base import SymCommand
from symcipher.domain.alphabet import ALPHABET
from symcipher.services.result import ServiceResult

if TYPE_CHECKING:
    from symcipher.commands._context import AppContext


@click.command(
    cls=SymCommand,
    examples="""\
  symcipher alphabet
  symcipher --json alphabet""",
)
@click.pass_obj
def alphabet(app: AppContext) -> None:
    """Show the 27 symbols and their shift positions."""
    symbols = [{"index": i, "symbol": s} for i, s in enumerate(ALPHABET)]
    app.emit(
        ServiceResult(ok=True, op="alphabet", data={"size": len(symbols), "symbols": symbols})
    )
