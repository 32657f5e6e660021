"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from symcipher.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from symcipher.config.settings import SymcipherSettings
    from symcipher.services.encryption import EncryptionService
    from symcipher.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The encryption service is built on first use so ``--help`` and
    ``--version`` never seed a random source.
    """

    def __init__(self, settings: SymcipherSettings) -> None:
        self.settings = settings
        self._service: EncryptionService | None = None

        from symcipher.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> EncryptionService:
        """The encryption service (created lazily on first access)."""
        if self._service is None:
            from symcipher.services.encryption import EncryptionService

            self._service = EncryptionService.from_settings(self.settings)
        return self._service

    @property
    def interactive(self) -> bool:
        return not self.settings.no_interact

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
