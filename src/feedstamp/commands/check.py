"""Check command for feedstamp."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from feedstamp.context import Context
from feedstamp.core import checker
from feedstamp.core.builder import locate_template
from feedstamp.core.overrides import gather_overrides, get_template_argument
from feedstamp.exceptions import FeedstampError

console = Console()


@click.command(
    "check",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Template file (default: paths.template)",
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
def check_command(
    ctx: click.Context,
    template_path: Path | None,
    pairs: tuple[str, ...],
    rss_args: tuple[str, ...],
) -> None:
    """Check a feed template without writing the feed.

    Resolves channel placeholders and verifies the required
    <title>, <link> and <description> elements.
    """
    cli_ctx: Context = ctx.find_object(Context)  # type: ignore[assignment]
    config = cli_ctx.load_config()

    if template_path is None and (rss_template := get_template_argument(rss_args)):
        template_path = Path(rss_template)

    try:
        overrides = gather_overrides(config.feed.overrides, pairs, rss_args)
        path = locate_template(config, template_path, create_missing=False)
    except FeedstampError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(e.exit_code) from e

    console.print(f"Checking {path}...\n")
    report = checker.run_checks(path.read_text(encoding="utf-8"), overrides)

    for check in report.checks:
        icon = "[green]✓[/green]" if check.passed else "[red]✗[/red]"
        console.print(f"{icon} {escape(check.message)}")

        if check.details:
            if check.passed:
                console.print(f"  [yellow]⚠[/yellow] {escape(check.details)}")
            else:
                console.print(f"    {escape(check.details)}")

    console.print()
    if report.passed:
        warning_count = len(report.warnings)
        if warning_count > 0:
            console.print(f"[green]Check passed[/green] with {warning_count} note(s).")
        else:
            console.print("[green]Check passed.[/green]")
    else:
        console.print(f"[red]Check failed[/red] with {len(report.failures)} error(s).")
        raise SystemExit(1)
