"""Subcommand modules for symcipher.

Provides register_commands() which uses deferred imports to keep
``symcipher --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from symcipher.commands.alphabet import alphabet
    from symcipher.commands.encrypt import encrypt
    from symcipher.commands.session import session
    from symcipher.commands.validate import validate

    cli.add_command(encrypt)
    cli.add_command(validate)
    cli.add_command(alphabet)
    cli.add_command(session)
