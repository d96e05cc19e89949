"""Command-line interface for feedstamp."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from feedstamp import __version__
from feedstamp.context import Context
from feedstamp.exceptions import FeedstampError

console = Console()
error_console = Console(stderr=True)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def setup_logging(verbosity: int, no_color: bool = False) -> None:
    """Route the ``feedstamp`` loggers through rich on stderr.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2+=DEBUG
        no_color: Disable colour in log output.
    """
    logger = logging.getLogger("feedstamp")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True, no_color=no_color),
            show_time=False,
            show_path=verbosity > 1,
        )
    )
    logger.setLevel(LOG_LEVELS.get(verbosity, logging.DEBUG))


def fail(error: FeedstampError) -> None:
    """Print an error and exit with its exit code."""
    error_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(error.exit_code)


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase output verbosity (can be repeated: -vv)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Suppress non-essential output",
)
@click.option(
    "--config",
    "config_path",
    envvar="FEEDSTAMP_CONFIG",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Use custom config file [env: FEEDSTAMP_CONFIG]",
)
@click.option(
    "--root",
    "root_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root directory (overrides paths.root)",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable colored output",
)
@click.version_option(version=__version__, prog_name="feedstamp")
@pass_context
def main(
    ctx: Context,
    verbose: int,
    quiet: bool,
    config_path: Path | None,
    root_path: Path | None,
    no_color: bool,
) -> None:
    """feedstamp - Build RSS feeds from placeholder templates.

    Fills {{Title}}, {{Link}} and {{Description}} from --rss:KEY=VALUE
    overrides and stamps the <Items> block once per markdown page.
    """
    ctx.verbose = verbose
    ctx.quiet = quiet
    ctx.no_color = no_color
    ctx.root_override = root_path

    console.no_color = no_color
    error_console.no_color = no_color

    if not quiet:
        setup_logging(verbose, no_color)

    try:
        ctx.load_config(config_path)
        ctx.pin_project_root()
    except FeedstampError as e:
        fail(e)


@main.command()
@pass_context
def version(_ctx: Context) -> None:
    """Show version and exit."""
    console.print(f"feedstamp {__version__}")


def register_commands() -> None:
    """Register all subcommands."""
    from feedstamp.commands.build import build_command
    from feedstamp.commands.check import check_command
    from feedstamp.commands.init import init_command

    for command in (init_command, build_command, check_command):
        main.add_command(command)


register_commands()


if __name__ == "__main__":
    main()
