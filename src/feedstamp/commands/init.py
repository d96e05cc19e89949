"""Init command for feedstamp."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from feedstamp.context import Context
from feedstamp.core import template

console = Console()


@click.command("init")
@click.option(
    "--path",
    "template_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the template (default: paths.template)",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing template",
)
@click.pass_context
def init_command(ctx: click.Context, template_path: Path | None, force: bool) -> None:
    """Write the default feed template.

    The template uses {{Title}}, {{Link}} and {{Description}} placeholders
    and an <Items> block stamped once per page.
    """
    cli_ctx: Context = ctx.find_object(Context)  # type: ignore[assignment]
    config = cli_ctx.load_config()

    target = config.resolve_path(template_path or config.paths.template)

    try:
        result = template.create_default_template(target, force=force)
    except FileExistsError as e:
        console.print(f"[yellow]{e}[/yellow]")
        console.print("Use --force to overwrite.")
        raise SystemExit(1) from e

    verb = "Overwrote" if result.overwritten else "Created"
    console.print(f"[green]{verb} template:[/green] {result.template_path}")

    console.print("\n[bold]Next steps:[/bold]")
    console.print("  1. Fill in or keep the {{Title}}, {{Link}}, {{Description}} placeholders")
    console.print(
        '  2. Run: feedstamp build --rss:Title="..." --rss:Link=https://... '
        '--rss:Description="..."'
    )
