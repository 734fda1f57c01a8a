"""Setup commands for TradeLog CLI."""

from pathlib import Path

import click
from rich.panel import Panel

from tradelog.cli._common import console
from tradelog.config import CONFIG_PATH, create_template_config


@click.command(name="init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
@click.pass_context
def init_config(ctx: click.Context, force: bool) -> None:
    """Write a template config file.

    \b
    Examples:
      tradelog init
      tradelog --config ./tradelog.toml init
    """
    config_path = Path(ctx.obj.get("config_path") or CONFIG_PATH)

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] [cyan]{config_path}[/cyan]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config[/bold yellow]",
            border_style="yellow",
        ))
        return

    written = create_template_config(config_path)
    console.print(Panel(
        f"[green]Config written to[/green] [cyan]{written}[/cyan]\n\n"
        "[dim]Set data.entries_path to your exported day entries.[/dim]",
        title="[bold green]Config[/bold green]",
        border_style="green",
    ))
