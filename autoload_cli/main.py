"""Autoload CLI - inspect symbol resolution and load symbols on demand."""

import logging

import click

from .commands.mode import mode as mode_group
from .commands.override import override as override_group
from .commands.prefix import prefix as prefix_group
from .commands.resolve import dirs_cmd
from .commands.resolve import find_cmd
from .commands.resolve import load_cmd
from .commands.resolve import path_cmd
from .loader import Mode
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(package_name="autoload-cli")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Operating mode for this run (overrides settings and AUTOLOAD_MODE)",
)
@click.option("--log-level", default=None, help="Log level for the JSONL log (default: AUTOLOAD_LOG_LEVEL or INFO)")
@click.option("--log-path", default=None, help="JSONL log file (default: AUTOLOAD_LOG_PATH or ./autoload.log.jsonl)")
@click.pass_context
def cli(ctx: click.Context, mode: str | None, log_level: str | None, log_path: str | None):
    """Autoload - resolve symbol names to source files and load them on demand."""
    init_json_logging(path=log_path, level=log_level)
    ctx.ensure_object(dict)
    ctx.obj["mode"] = mode
    logger.debug(f"autoload CLI started (mode={mode or 'settings'})")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


cli.add_command(path_cmd)
cli.add_command(find_cmd)
cli.add_command(dirs_cmd)
cli.add_command(load_cmd)
cli.add_command(prefix_group)
cli.add_command(override_group)
cli.add_command(mode_group)


def main():
    """Entry point for the autoload CLI."""
    cli()


if __name__ == "__main__":
    main()
