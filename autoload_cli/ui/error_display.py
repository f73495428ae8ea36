"""Clean error display for autoload and settings errors."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..errors import AlreadyLoaded
from ..errors import AutoloadError
from ..errors import NotDeclared
from ..errors import NotReadable
from ..settings import SettingsError

_TITLES = {
    AlreadyLoaded: "Symbol Already Loaded",
    NotReadable: "Symbol File Not Found",
    NotDeclared: "Symbol Not Declared",
}


def trail_table(trail: tuple[str, ...] | list[str]) -> Table:
    """Table of probed locations, numbered in probe order."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Location")
    for i, entry in enumerate(trail):
        table.add_row(str(i), entry)
    return table


def display_autoload_error(console: Console, error: Exception, verbose: bool = False) -> bool:
    """
    Display an AutoloadError with clean Rich formatting.

    Args:
        console: Rich console for output
        error: The error to display
        verbose: If True, also print traceback

    Returns:
        True if error was handled, False if not (caller should handle)
    """
    if not isinstance(error, AutoloadError):
        return False

    title = _TITLES.get(type(error), "Autoload Failed")

    content = Text()
    content.append("Symbol: ", style="dim")
    content.append(error.name, style="bold cyan")
    content.append("\n")
    content.append("Error: ", style="dim")
    content.append(type(error).__name__, style="red")

    console.print()
    console.print(
        Panel(
            content,
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )

    if isinstance(error, NotReadable):
        if error.trail:
            console.print("[dim]Locations tried:[/dim]")
            console.print(trail_table(error.trail))
        else:
            console.print("[dim]No locations were tried.[/dim]")

    console.print()
    console.print(f"[dim]Tip: {_get_actionable_tip(error)}[/dim]")
    console.print()

    if verbose:
        console.print("[dim]─── Traceback ───[/dim]")
        console.print_exception()

    return True


def display_settings_error(console: Console, error: Exception) -> bool:
    """Display a SettingsError; returns False for any other exception."""
    if not isinstance(error, SettingsError):
        return False

    console.print()
    console.print(
        Panel(
            Text(str(error.error)),
            title=f"[bold red]Invalid Settings: {error.path}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )
    return True


def _get_actionable_tip(error: AutoloadError) -> str:
    if isinstance(error, NotReadable):
        return "Register a prefix with: autoload prefix add <prefix> <dir>"
    if isinstance(error, NotDeclared):
        return f"Check that the file defines '{error.name}' (set __namespace__ for namespaced symbols)"
    return "Use normal mode to make repeated loads a no-op: autoload mode set normal"
