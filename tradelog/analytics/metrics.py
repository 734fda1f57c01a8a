"""Aggregate performance metrics over day entries.

Every function here is pure: it takes a list of ``DayEntry`` objects, never
mutates it, and returns a scalar or a small result model. Degenerate inputs
(empty lists, zero denominators) return ``0`` or ``math.inf`` instead of
raising.

A "trading day" is an entry whose total P&L is non-zero. Zero days count
towards sums and day counts but never towards win-rate denominators.
"""

import math
from typing import Literal

from tradelog.analytics.dates import parse_entry_date, sort_chronologically, weekday_index
from tradelog.models import DayEntry, LargestWinLoss, WinLossStreaks

OUTLIER_THRESHOLD = 10000.0


def filter_outliers(
    entries: list[DayEntry], threshold: float = OUTLIER_THRESHOLD
) -> list[DayEntry]:
    """Drop entries whose total P&L is at or above ``threshold``."""
    return [entry for entry in entries if entry.total_pl < threshold]


def get_pl_status(value: float) -> Literal["profit", "loss", "neutral"]:
    """Classify a P&L value for display."""
    if value > 0:
        return "profit"
    if value < 0:
        return "loss"
    return "neutral"


def calculate_cumulative_pl(entries: list[DayEntry]) -> float:
    """Sum of total P&L over all entries."""
    return sum((entry.total_pl for entry in entries), 0.0)


def calculate_adjusted_pl(entries: list[DayEntry], adjustment: float) -> float:
    """Cumulative P&L plus a manual adjustment supplied by the caller."""
    return calculate_cumulative_pl(entries) + adjustment


def _win_rate(entries: list[DayEntry]) -> float:
    trading_days = [entry for entry in entries if entry.total_pl != 0]
    if not trading_days:
        return 0.0
    wins = sum(1 for entry in trading_days if entry.total_pl > 0)
    return wins / len(trading_days) * 100


def calculate_win_rate(entries: list[DayEntry]) -> float:
    """Percentage of trading days that closed positive.

    Args:
        entries: Day entries.

    Returns:
        Win rate between 0 and 100. Zero when there are no trading days.
    """
    return _win_rate(entries)


def calculate_fk_win_rate(entries: list[DayEntry]) -> float:
    """Win rate restricted to trading days without falling knives."""
    return _win_rate([entry for entry in entries if entry.falling_knife_count == 0])


def calculate_average_return(entries: list[DayEntry]) -> float:
    """Cumulative P&L divided by the total number of trades."""
    total_trades = sum(entry.number_of_trades for entry in entries)
    if total_trades == 0:
        return 0.0
    return calculate_cumulative_pl(entries) / total_trades


def average_win_loss(entries: list[DayEntry]) -> tuple[float, float]:
    """Mean winning day and mean losing-day magnitude.

    Returns:
        Tuple of (avg_win, avg_loss). ``avg_loss`` is positive. Either side is
        0 when there are no qualifying days.
    """
    wins = [entry.total_pl for entry in entries if entry.total_pl > 0]
    losses = [entry.total_pl for entry in entries if entry.total_pl < 0]

    avg_win = sum(wins) / len(wins) if wins else 0.0
    avg_loss = abs(sum(losses) / len(losses)) if losses else 0.0
    return avg_win, avg_loss


def calculate_profit_factor(entries: list[DayEntry]) -> float:
    """Gross profit divided by gross loss.

    Returns ``math.inf`` when there are profits but no losses, and 0 when
    there are neither.
    """
    profits = sum((e.total_pl for e in entries if e.total_pl > 0), 0.0)
    losses = abs(sum((e.total_pl for e in entries if e.total_pl < 0), 0.0))

    if losses == 0:
        return math.inf if profits > 0 else 0.0
    return profits / losses


def calculate_expectancy(entries: list[DayEntry]) -> float:
    """Expected P&L per trading day.

    ``avg_win * win_rate - avg_loss * loss_rate`` where the rates are
    fractions of trading days.
    """
    trading_days = [entry for entry in entries if entry.total_pl != 0]
    if not trading_days:
        return 0.0

    avg_win, avg_loss = average_win_loss(trading_days)
    wins = sum(1 for entry in trading_days if entry.total_pl > 0)
    losses = len(trading_days) - wins

    win_rate = wins / len(trading_days)
    loss_rate = losses / len(trading_days)
    return (avg_win * win_rate) - (avg_loss * loss_rate)


def calculate_avg_win_loss_ratio(entries: list[DayEntry]) -> float:
    """Average winning day divided by average losing-day magnitude."""
    avg_win, avg_loss = average_win_loss(entries)
    if avg_loss == 0:
        return math.inf if avg_win > 0 else 0.0
    return avg_win / avg_loss


def get_largest_win_loss(entries: list[DayEntry]) -> LargestWinLoss:
    """Largest positive and most negative single-day P&L."""
    wins = [entry.total_pl for entry in entries if entry.total_pl > 0]
    losses = [entry.total_pl for entry in entries if entry.total_pl < 0]
    return LargestWinLoss(
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
    )


def get_win_loss_streaks(entries: list[DayEntry]) -> WinLossStreaks:
    """Longest and current win/loss streaks over trading days.

    Zero-P&L days are removed before the streaks are walked, so they neither
    extend nor break a streak. The current streak is the one active at the
    most recent trading day: positive for wins, negative for losses.
    """
    trading_days = [e for e in sort_chronologically(entries) if e.total_pl != 0]

    current_streak = 0
    longest_win = 0
    longest_loss = 0
    win_run = 0
    loss_run = 0

    for entry in trading_days:
        if entry.total_pl > 0:
            win_run += 1
            loss_run = 0
            longest_win = max(longest_win, win_run)
            current_streak = win_run
        else:
            loss_run += 1
            win_run = 0
            longest_loss = max(longest_loss, loss_run)
            current_streak = -loss_run

    return WinLossStreaks(
        current_streak=current_streak,
        longest_win_streak=longest_win,
        longest_loss_streak=longest_loss,
    )


def calculate_average_trades_per_day(entries: list[DayEntry]) -> float:
    """Average number of trades over Monday-Friday entries."""
    weekday_entries = [
        entry
        for entry in entries
        if 1 <= weekday_index(parse_entry_date(entry.id)) <= 5
    ]
    if not weekday_entries:
        return 0.0
    total_trades = sum(entry.number_of_trades for entry in weekday_entries)
    return total_trades / len(weekday_entries)


def get_total_falling_knives(entries: list[DayEntry]) -> int:
    """Total falling knife count across all entries."""
    return sum(entry.falling_knife_count for entry in entries)
