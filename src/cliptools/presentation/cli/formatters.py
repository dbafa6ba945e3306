"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (error line, settings panel) in a dedicated
module that knows nothing about clipboard logic.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from cliptools.domain.models.enums import ColorWhen

console = Console(highlight=False)


def error_console(color: ColorWhen = ColorWhen.AUTO) -> Console:
    """Return a console on standard error honouring *color*.

    ``AUTO`` leaves detection to Rich, which only colors an interactive
    terminal whose ``TERM`` is not ``dumb``.
    """
    if color is ColorWhen.ALWAYS:
        return Console(stderr=True, force_terminal=True, color_system="standard", highlight=False)
    if color is ColorWhen.NEVER:
        return Console(stderr=True, color_system=None, highlight=False)
    return Console(stderr=True, highlight=False)


# ---------------------------------------------------------------------------
# Success / error messages
# ---------------------------------------------------------------------------


def error_message(message: str, color: ColorWhen = ColorWhen.AUTO) -> None:
    """Print a single red error line to standard error."""
    error_console(color).print(f"[bold red]error:[/] {escape(message)}", soft_wrap=True)


def success_message(message: str) -> None:
    """Print a green confirmation line."""
    console.print(f"[green]{escape(message)}[/]", soft_wrap=True)


# ---------------------------------------------------------------------------
# JSON / settings rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "cliptools settings") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai"),
            title=title,
            border_style="blue",
        )
    )
