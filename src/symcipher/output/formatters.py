"""Rich/JSON/status-line output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The status-line helpers encode a result as the line-oriented
``"1: ..."`` / ``"0: ..."`` form printed by the interactive session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from symcipher.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from symcipher.services.result import ServiceResult

STATUS_OK = "1"
STATUS_FAILED = "0"


class OutputSettings(BaseModel):
    """Output mode flags carried from the CLI root."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def describe(result: ServiceResult) -> str:
    """One-line message for a result, without the status prefix.

    Examples: ``"Manual Encryption: dcw with key: 123"`` or the error
    message of a failed result.
    """
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    data = result.data
    if "ciphertext" in data:
        method = str(data.get("method", "")).capitalize()
        return f"{method} Encryption: {data['ciphertext']} with key: {data['key']}"
    return result.op


def encode_status(result: ServiceResult) -> str:
    """Encode *result* as ``"1: <message>"`` or ``"0: <message>"``."""
    code = STATUS_OK if result.ok else STATUS_FAILED
    return f"{code}: {describe(result)}"

