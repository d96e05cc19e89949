"""Build command for feedstamp."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from feedstamp.context import Context
from feedstamp.core import builder
from feedstamp.core.overrides import gather_overrides, get_template_argument
from feedstamp.exceptions import FeedstampError

console = Console()
error_console = Console(stderr=True)


@click.command(
    "build",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template file (default: paths.template, created if missing)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: paths.output)",
)
@click.option(
    "--content",
    "content_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory of markdown pages (default: paths.content)",
)
@click.option(
    "--set",
    "pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Override a placeholder or option (repeatable)",
)
@click.argument("rss_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def build_command(
    ctx: click.Context,
    template_path: Path | None,
    output_path: Path | None,
    content_path: Path | None,
    pairs: tuple[str, ...],
    rss_args: tuple[str, ...],
) -> None:
    """Render the feed template and write the feed.

    Values can also be given as --rss:KEY=VALUE, e.g.
    --rss:Title="My Blog" --rss:max-items=10 --rss:ignore-paths=drafts.
    """
    cli_ctx: Context = ctx.find_object(Context)  # type: ignore[assignment]
    config = cli_ctx.load_config()

    if content_path is not None:
        config.paths.content = content_path.resolve()

    if template_path is None and (rss_template := get_template_argument(rss_args)):
        template_path = Path(rss_template)

    try:
        overrides = gather_overrides(config.feed.overrides, pairs, rss_args)
        result = builder.build_feed(
            config,
            overrides,
            template=template_path,
            output=output_path,
        )
    except FeedstampError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(e.exit_code) from e

    if not cli_ctx.quiet:
        console.print(
            f"[green]Feed written:[/green] {result.output_path} "
            f"({result.entry_count} page(s) considered)"
        )
