"""Risk commands for TradeLog CLI.

Handles drawdown, rolling statistics, volatility, streaks and
value-at-risk output.
"""

from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradelog.analytics import (
    calculate_drawdown_series,
    calculate_r_multiples,
    calculate_risk_metrics,
    calculate_rolling_metrics,
    calculate_volatility_series,
    format_currency,
    format_percent,
    get_consecutive_wins_losses,
    get_win_loss_streaks,
)
from tradelog.cli._common import (
    console,
    empty_panel,
    format_pl,
    format_ratio,
    get_config,
    get_entries,
)


@click.command()
@click.option("--tail", type=click.IntRange(min=1), default=20, show_default=True, help="Number of recent days to show.")
@click.pass_context
def drawdown(ctx: click.Context, tail: int) -> None:
    """Display drawdown from the running peak per day."""
    entries = get_entries(ctx, get_config(ctx))
    points = calculate_drawdown_series(entries)

    if not points:
        empty_panel("Drawdown")
        return

    table = Table(title="Drawdown", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Drawdown", justify="right")
    table.add_column("Underwater", justify="right")

    for point in points[-tail:]:
        color = "red" if point.underwater > 0 else "green"
        table.add_row(
            point.date,
            f"[{color}]{format_percent(point.drawdown)}[/{color}]",
            f"[{color}]{format_currency(point.underwater)}[/{color}]",
        )

    console.print(table)
    console.print(
        f"\n[bold]Max Drawdown:[/bold] {format_percent(max(p.drawdown for p in points))}"
    )


@click.command()
@click.option("--window", type=click.IntRange(min=1), default=None, help="Trailing window size (default from config).")
@click.option("--tail", type=click.IntRange(min=1), default=20, show_default=True, help="Number of recent days to show.")
@click.pass_context
def rolling(ctx: click.Context, window: Optional[int], tail: int) -> None:
    """Display cumulative P&L with trailing average P&L and win rate."""
    config = get_config(ctx)
    entries = get_entries(ctx, config)
    if window is None:
        window = config["analytics"]["rolling_window"]

    points = calculate_rolling_metrics(entries, window_size=window)
    if not points:
        empty_panel("Rolling Metrics")
        return

    table = Table(title=f"Rolling Metrics ({window}-day)", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Avg P&L", justify="right")
    table.add_column("Win Rate", justify="right")
    table.add_column("Cumulative", justify="right")

    for point in points[-tail:]:
        table.add_row(
            point.date,
            format_pl(point.avg_pl),
            format_percent(point.win_rate),
            format_pl(point.cumulative),
        )

    console.print(table)


@click.command()
@click.option("--window", type=click.IntRange(min=1), default=None, help="Trailing window size (default from config).")
@click.option("--tail", type=click.IntRange(min=1), default=20, show_default=True, help="Number of recent days to show.")
@click.pass_context
def volatility(ctx: click.Context, window: Optional[int], tail: int) -> None:
    """Display annualized rolling volatility of daily P&L."""
    config = get_config(ctx)
    entries = get_entries(ctx, config)
    if window is None:
        window = config["analytics"]["volatility_window"]

    points = calculate_volatility_series(entries, window_size=window)
    if not points:
        console.print(Panel(
            f"[dim]Need at least {window} day entries for a full window[/dim]",
            title="[bold]Volatility[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title=f"Volatility ({window}-day, annualized)", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Volatility", justify="right")

    for point in points[-tail:]:
        table.add_row(point.date, format_currency(point.volatility))

    console.print(table)


@click.command()
@click.pass_context
def streaks(ctx: click.Context) -> None:
    """Display win/loss streaks and the run history."""
    entries = get_entries(ctx, get_config(ctx))
    runs = get_consecutive_wins_losses(entries)

    if not runs:
        empty_panel("Streaks")
        return

    stats = get_win_loss_streaks(entries)
    if stats.current_streak >= 0:
        current = f"[green]{stats.current_streak} wins[/green]"
    else:
        current = f"[red]{-stats.current_streak} losses[/red]"

    console.print(Panel(
        f"Current Streak:      {current}\n"
        f"Longest Win Streak:  [green]{stats.longest_win_streak}[/green]\n"
        f"Longest Loss Streak: [red]{stats.longest_loss_streak}[/red]",
        title="[bold cyan]Streaks[/bold cyan]",
        border_style="cyan",
    ))

    history = " ".join(
        f"[green]{run.consecutive}W[/green]" if run.type == "win" else f"[red]{run.consecutive}L[/red]"
        for run in runs
    )
    console.print(f"\n[bold]Runs:[/bold] {history}")


@click.command()
@click.pass_context
def risk(ctx: click.Context) -> None:
    """Display historical value-at-risk and R-multiples."""
    entries = get_entries(ctx, get_config(ctx))

    if not entries:
        empty_panel("Risk")
        return

    metrics = calculate_risk_metrics(entries)
    r = calculate_r_multiples(entries)
    best_r = max(r.r_multiples)
    worst_r = min(r.r_multiples)

    console.print(Panel(
        f"VaR (95%):   {format_pl(metrics.value_at_risk_95)}\n"
        f"VaR (99%):   {format_pl(metrics.value_at_risk_99)}\n"
        f"CVaR (95%):  {format_pl(metrics.conditional_var_95)}\n"
        f"{'─' * 30}\n"
        f"Avg Win:     {format_ratio(r.avg_win_r)}R\n"
        f"Avg Loss:    {format_ratio(r.avg_loss_r)}R\n"
        f"Best Day:    {format_ratio(best_r)}R\n"
        f"Worst Day:   {format_ratio(worst_r)}R",
        title="[bold cyan]Risk[/bold cyan]",
        border_style="cyan",
    ))
