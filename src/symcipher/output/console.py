"""Rich Console factory and theme for symcipher output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SYM_THEME = Theme(
    {
        "sym.ok": "bold green",
        "sym.error": "bold red",
        "sym.op": "bold cyan",
        "sym.key": "dim",
        "sym.cipher": "bold magenta",
        "sym.number": "bold blue",
        "sym.method.manual": "yellow",
        "sym.method.random": "cyan",
    }
)

_METHOD_STYLES: dict[str, str] = {
    "manual": "sym.method.manual",
    "random": "sym.method.random",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SYM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_method(method: str) -> str:
    """Return the Rich style name for a key strategy."""
    return _METHOD_STYLES.get(method, "")
