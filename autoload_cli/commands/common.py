"""Helpers shared by the command groups."""

from __future__ import annotations

import click

from ..console import console
from ..host import HostProtocol
from ..loader import Loader
from ..paths import create_loader
from ..settings import SettingsError
from ..ui.error_display import display_settings_error


def loader_from_context(ctx: click.Context, host: HostProtocol | None = None) -> Loader:
    """Build the configured loader for a command, honouring the global ``--mode``.

    Invalid settings files and an invalid AUTOLOAD_MODE abort the command
    with a readable message instead of a traceback.
    """
    try:
        return create_loader(host=host, mode=(ctx.obj or {}).get("mode"))
    except SettingsError as e:
        display_settings_error(console, e)
        raise click.Abort() from e
    except ValueError as e:
        # Unknown mode name from the environment
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort() from e
