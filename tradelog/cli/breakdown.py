"""Breakdown commands for TradeLog CLI.

P&L attributed by ticker, weekday, tag and month, and the per-trade
return histogram.
"""

import click
from rich.table import Table

from tradelog.analytics import (
    calculate_monthly_returns,
    format_percent,
    get_pl_by_day_of_week,
    get_pl_by_tag,
    get_pl_by_ticker,
    get_return_distribution,
    get_return_histogram,
)
from tradelog.cli._common import console, empty_panel, format_pl, get_config, get_entries


@click.command()
@click.option("--limit", type=click.IntRange(min=1), default=10, show_default=True, help="Number of tickers to show.")
@click.pass_context
def tickers(ctx: click.Context, limit: int) -> None:
    """Display P&L attributed to each ticker.

    A day's P&L is split evenly across the trades taken that day.

    \b
    Examples:
      tradelog tickers
      tradelog tickers --limit 25
    """
    entries = get_entries(ctx, get_config(ctx))
    rows = get_pl_by_ticker(entries)[:limit]

    if not rows:
        empty_panel("P&L by Ticker")
        return

    table = Table(title="P&L by Ticker", show_header=True, header_style="bold cyan")
    table.add_column("Ticker", style="bold")
    table.add_column("P&L", justify="right")
    table.add_column("Trades", justify="right")

    for row in rows:
        table.add_row(row.ticker, format_pl(row.pl), str(row.trades))

    console.print(table)


@click.command()
@click.pass_context
def weekdays(ctx: click.Context) -> None:
    """Display P&L summed by day of the week."""
    entries = get_entries(ctx, get_config(ctx))

    table = Table(title="P&L by Day of Week", show_header=True, header_style="bold cyan")
    table.add_column("Day", style="bold")
    table.add_column("P&L", justify="right")

    for row in get_pl_by_day_of_week(entries):
        table.add_row(row.day, format_pl(row.pl))

    console.print(table)


@click.command()
@click.pass_context
def tags(ctx: click.Context) -> None:
    """Display P&L attributed to each tag.

    Days with several tags count in full towards each tag.
    """
    entries = get_entries(ctx, get_config(ctx))
    rows = get_pl_by_tag(entries)

    if not rows:
        empty_panel("P&L by Tag")
        return

    table = Table(title="P&L by Tag", show_header=True, header_style="bold cyan")
    table.add_column("Tag", style="bold")
    table.add_column("P&L", justify="right")
    table.add_column("Days", justify="right")

    for row in rows:
        table.add_row(row.tag, format_pl(row.pl), str(row.count))

    console.print(table)


@click.command()
@click.option("--bin-size", type=click.IntRange(min=1), default=5, show_default=True, help="Bin width in percent.")
@click.pass_context
def distribution(ctx: click.Context, bin_size: int) -> None:
    """Display the histogram of per-trade percentage returns."""
    entries = get_entries(ctx, get_config(ctx))
    bins = get_return_histogram(get_return_distribution(entries), bin_size=bin_size)

    if not bins:
        empty_panel("Return Distribution")
        return

    peak = max(b.count for b in bins) or 1

    table = Table(title="Return Distribution", show_header=True, header_style="bold cyan")
    table.add_column("Range", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("")

    for b in bins:
        color = "green" if b.start >= 0 else "red"
        bar = "█" * round(b.count / peak * 30)
        table.add_row(b.label, str(b.count), f"[{color}]{bar}[/{color}]")

    console.print(table)


@click.command()
@click.pass_context
def monthly(ctx: click.Context) -> None:
    """Display P&L, trades and win rate per month."""
    entries = get_entries(ctx, get_config(ctx))
    rows = calculate_monthly_returns(entries)

    if not rows:
        empty_panel("Monthly Returns")
        return

    table = Table(title="Monthly Returns", show_header=True, header_style="bold cyan")
    table.add_column("Month", style="bold")
    table.add_column("P&L", justify="right")
    table.add_column("Trades", justify="right")
    table.add_column("Win Rate", justify="right")

    for row in rows:
        table.add_row(row.month, format_pl(row.pl), str(row.trades), format_percent(row.win_rate))

    console.print(table)
