"""Shared helpers for TradeLog CLI commands."""

import math
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from tradelog.analytics import filter_outliers, format_currency, get_pl_status
from tradelog.config import load_config
from tradelog.data import EntryLoadError, load_entries
from tradelog.models import DayEntry

console = Console()

PL_COLORS = {"profit": "green", "loss": "red", "neutral": "dim"}


def error_panel(message: str) -> None:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        message,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def get_config(ctx: click.Context) -> dict:
    """Load the configuration selected by the group options."""
    return load_config(ctx.obj.get("config_path"))


def get_entries(ctx: click.Context, config: dict) -> list[DayEntry]:
    """Load day entries and apply the outlier policy.

    Args:
        ctx: Click context carrying the group options.
        config: Loaded configuration.

    Returns:
        Day entries, outlier-filtered unless disabled.
    """
    data_path = ctx.obj.get("data_path") or Path(config["data"]["entries_path"])

    try:
        entries = load_entries(data_path)
    except EntryLoadError as e:
        error_panel(
            f"[red]Could not load day entries.[/red]\n\n{e.source}\n{e.message}\n\n"
            "Pass [cyan]--data PATH[/cyan] or set [cyan]data.entries_path[/cyan] in config.toml."
        )

    analytics = config.get("analytics", {})
    if ctx.obj.get("include_outliers") or not analytics.get("exclude_outliers", True):
        return entries
    return filter_outliers(entries, threshold=analytics.get("outlier_threshold", 10000.0))


def format_pl(value: float) -> str:
    """Colored currency string for a P&L value."""
    color = PL_COLORS[get_pl_status(value)]
    sign = "+" if value > 0 else ""
    return f"[{color}]{sign}{format_currency(value)}[/{color}]"


def format_ratio(value: float) -> str:
    """Two-decimal ratio, rendering infinity as ∞."""
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:.2f}"


def empty_panel(title: str) -> None:
    """Print a dim panel for commands with nothing to show."""
    console.print(Panel(
        "[dim]No day entries found[/dim]",
        title=f"[bold]{title}[/bold]",
        border_style="dim",
    ))
