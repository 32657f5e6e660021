"""Command: interactive encryption session.

Line-oriented prompt protocol::

    Enter text to encrypt(alphabetic): cat
    Text to encrypt: cat

    Enter encryption method, manual array | randomised array(enter, 0 | 1): 0
    Manual array selected.
    Enter key: 123

    Encryption process completed.
    Result: Manual Encryption: dcw with key: 123

A failed attempt reports the error and starts over with a ``Re-enter``
prompt. The loop ends on the first success, after ``[session]
max_attempts`` failures (0 = never), or when input runs out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from symcipher.commands._base import SymCommand
from symcipher.domain.types import EncryptionMethod, PromptPrefix
from symcipher.output.formatters import describe
from symcipher.services.encryption import INVALID_METHOD
from symcipher.services.result import ServiceResult

if TYPE_CHECKING:
    from symcipher.commands._context import AppContext

log = structlog.get_logger(__name__)

TEXT_PROMPT = "{prefix} text to encrypt(alphabetic): "
METHOD_PROMPT = "\nEnter encryption method, manual array | randomised array(enter, 0 | 1): "
KEY_PROMPT = "Enter key: "


def _read(prompt: str) -> str:
    """Read one line verbatim; an empty line is returned as ``""``."""
    return click.prompt(prompt, default="", show_default=False, prompt_suffix="")


def run_attempt(app: AppContext, prefix: PromptPrefix) -> ServiceResult:
    """Run one prompt cycle: text, method, then key for manual mode."""
    service = app.service

    text = _read(TEXT_PROMPT.format(prefix=prefix))
    click.echo(f"Text to encrypt: {text}")
    checked = service.validate(text)
    if not checked.ok:
        return checked

    method = _read(METHOD_PROMPT).strip()
    if method == EncryptionMethod.MANUAL:
        click.echo("Manual array selected.")
        return service.encrypt_manual(text, _read(KEY_PROMPT))
    if method == EncryptionMethod.RANDOM:
        return service.encrypt_random(text)
    return ServiceResult.failure("encrypt", INVALID_METHOD, "Invalid method selected.", method=method)


def _report_failure(result: ServiceResult, separator_width: int) -> None:
    click.echo("\nEncryption process failed.", err=True)
    click.echo(f"Error: {describe(result)}")
    click.echo(f"\n{'=' * separator_width}\n", err=True)


@click.command(
    cls=SymCommand,
    examples="""\
  symcipher session
  printf 'cat\\n0\\n123\\n' | symcipher session
  SYMCIPHER_SESSION__MAX_ATTEMPTS=3 symcipher session""",
)
@click.pass_obj
def session(app: AppContext) -> None:
    """Prompt for text and a key strategy until encryption succeeds."""
    if not app.interactive:
        raise click.ClickException("session needs prompts; use 'encrypt' with --no-interact.")

    config = app.settings.session
    prefix = PromptPrefix.ENTER
    failures = 0

    while True:
        result = run_attempt(app, prefix)
        if result.ok:
            click.echo("\nEncryption process completed.")
            click.echo(f"Result: {describe(result)}")
            return

        failures += 1
        code = result.error.code if result.error else None
        log.debug("session attempt failed", attempt=failures, code=code)
        _report_failure(result, config.separator_width)

        if config.max_attempts and failures >= config.max_attempts:
            msg = f"Giving up after {failures} failed attempt(s)."
            raise click.ClickException(msg)
        prefix = PromptPrefix.REENTER
