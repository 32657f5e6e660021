"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from symcipher.output.console import create_console, get_output, style_for_method

if TYPE_CHECKING:
    from rich.console import Console

    from symcipher.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "ciphertext" in result.data:
        return str(result.data["ciphertext"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="sym.ok"), Text(f"  {result.op}", style="sym.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="sym.key"), Text(str(value), style=style), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_encrypt(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    method = str(data.get("method", ""))
    _field(console, "method", method, style_for_method(method))
    if verbose:
        _field(console, "text", repr(data.get("text", "")))
    _field(console, "ciphertext", repr(data.get("ciphertext", "")), "sym.cipher")
    _field(console, "key", data.get("key", ""), "sym.number")


def _render_alphabet(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="sym.number", justify="right")
    table.add_column("Symbol")
    for entry in result.data.get("symbols", []):
        symbol = entry["symbol"]
        table.add_row(str(entry["index"]), "(space)" if symbol == " " else symbol)
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sym.error")
    op = Text(f"  {result.op}", style="sym.op")
    console.print(label, op, Text(" — "), msg, sep="")
    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, repr(value) if isinstance(value, str) else value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "encrypt_manual": _render_encrypt,
    "encrypt_random": _render_encrypt,
    "alphabet": _render_alphabet,
}
