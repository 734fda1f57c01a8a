"""Summary commands for TradeLog CLI.

Handles the performance summary and the monthly/weekly P&L panels.
"""

from datetime import date
from typing import Optional

import click
from rich.panel import Panel

from tradelog.analytics import (
    calculate_adjusted_pl,
    calculate_monthly_pl,
    calculate_performance_summary,
    calculate_weekly_pl,
    format_currency,
    format_percent,
    get_monthly_falling_knives,
    get_most_recent_month_with_data,
)
from tradelog.cli._common import (
    console,
    error_panel,
    format_pl,
    format_ratio,
    get_config,
    get_entries,
)
from tradelog.config import get_user_settings


@click.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    """Display the performance summary.

    Shows cumulative P&L (with the starting balance adjustment), win rate,
    drawdown, risk ratios and streaks.

    \b
    Examples:
      tradelog summary
      tradelog --include-outliers summary
    """
    config = get_config(ctx)
    settings = get_user_settings(config)
    entries = get_entries(ctx, config)

    metrics = calculate_performance_summary(entries)
    adjusted = calculate_adjusted_pl(entries, settings.starting_balance)

    if metrics.current_streak > 0:
        streak = f"[green]{metrics.current_streak}W[/green]"
    elif metrics.current_streak < 0:
        streak = f"[red]{-metrics.current_streak}L[/red]"
    else:
        streak = "-"

    summary_text = (
        f"[bold]Cumulative P&L:[/bold] {format_pl(metrics.cumulative_pl)}\n"
        f"[dim]Incl. {format_currency(settings.starting_balance)} adjustment:[/dim] "
        f"{format_pl(adjusted)}\n"
        f"[dim]Net worth:[/dim] {format_currency(settings.net_worth)}\n"
        f"{'─' * 36}\n"
        f"Trading Days:      {metrics.trading_days}\n"
        f"Win Rate:          {format_percent(metrics.win_rate)}\n"
        f"Win Rate (no FK):  {format_percent(metrics.fk_win_rate)}\n"
        f"Avg Return/Trade:  {format_currency(metrics.avg_return)}\n"
        f"Expectancy:        {format_currency(metrics.expectancy)}\n"
        f"Avg Trades/Day:    {metrics.avg_trades_per_day:.2f}\n"
        f"{'─' * 36}\n"
        f"Max Drawdown:      {format_percent(metrics.max_drawdown)}\n"
        f"Profit Factor:     {format_ratio(metrics.profit_factor)}\n"
        f"Sharpe Ratio:      {format_ratio(metrics.sharpe_ratio)}\n"
        f"Sortino Ratio:     {format_ratio(metrics.sortino_ratio)}\n"
        f"Calmar Ratio:      {format_ratio(metrics.calmar_ratio)}\n"
        f"Recovery Factor:   {format_ratio(metrics.recovery_factor)}\n"
        f"Avg Win/Loss:      {format_ratio(metrics.avg_win_loss_ratio)}\n"
        f"{'─' * 36}\n"
        f"Largest Win:       {format_pl(metrics.largest_win)}\n"
        f"Largest Loss:      {format_pl(metrics.largest_loss)}\n"
        f"Current Streak:    {streak}\n"
        f"Longest Streaks:   [green]{metrics.longest_win_streak}W[/green] / "
        f"[red]{metrics.longest_loss_streak}L[/red]\n"
        f"Falling Knives:    {metrics.total_falling_knives}"
    )

    console.print(Panel(
        summary_text,
        title="[bold cyan]Performance Summary[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.option(
    "--month",
    "month_str",
    type=str,
    default=None,
    help="Month to show (YYYY-MM). Defaults to the latest month with data.",
)
@click.pass_context
def month(ctx: click.Context, month_str: Optional[str]) -> None:
    """Display P&L and falling knives for one month.

    \b
    Examples:
      tradelog month
      tradelog month --month 2024-03
    """
    config = get_config(ctx)
    entries = get_entries(ctx, config)

    if month_str:
        try:
            year, month_num = (int(part) for part in month_str.split("-"))
            selected = date(year, month_num, 1)
        except ValueError:
            error_panel(f"[red]Invalid month:[/red] {month_str}\n\nUse the YYYY-MM format.")
    else:
        selected = get_most_recent_month_with_data(entries)

    pl = calculate_monthly_pl(entries, selected)
    knives = get_monthly_falling_knives(entries, selected)

    console.print(Panel(
        f"[bold]{selected.strftime('%B %Y')}[/bold]\n\n"
        f"P&L:            {format_pl(pl)}\n"
        f"Falling Knives: {knives}",
        title="[bold cyan]Monthly P&L[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.pass_context
def week(ctx: click.Context) -> None:
    """Display P&L for the week of the latest entry.

    Weeks run Sunday to Saturday.
    """
    config = get_config(ctx)
    entries = get_entries(ctx, config)

    console.print(Panel(
        f"Weekly P&L: {format_pl(calculate_weekly_pl(entries))}",
        title="[bold cyan]This Week[/bold cyan]",
        border_style="cyan",
    ))
