"""Grouping, attribution and time-series functions over day entries.

Functions that walk entries in order sort a copy by id (chronological order
for ``YYYY-MM-DD`` keys). Attribution tables are sorted by P&L descending;
the sort is stable so ties keep first-seen order.
"""

import math
from datetime import date
from typing import Optional

from tradelog.analytics.dates import (
    WEEKDAY_NAMES,
    month_key,
    parse_entry_date,
    sort_chronologically,
    week_bounds,
    weekday_index,
)
from tradelog.analytics.metrics import calculate_win_rate
from tradelog.analytics.risk import TRADING_DAYS_PER_YEAR, population_std
from tradelog.models import (
    DayEntry,
    DrawdownPoint,
    HistogramBin,
    MonthlyReturn,
    RollingPoint,
    StreakRun,
    TagPL,
    TickerPL,
    VolatilityPoint,
    WeekdayPL,
)


# ==================== Attribution ====================


def get_pl_by_ticker(entries: list[DayEntry]) -> list[TickerPL]:
    """Attribute each day's P&L evenly across the tickers traded that day.

    Args:
        entries: Day entries.

    Returns:
        One TickerPL per symbol, sorted by P&L descending.
    """
    totals: dict[str, list] = {}

    for entry in entries:
        if not entry.trades:
            continue
        share = entry.total_pl / len(entry.trades)
        for trade in entry.trades:
            bucket = totals.setdefault(trade.symbol, [0.0, 0])
            bucket[0] += share
            bucket[1] += 1

    results = [
        TickerPL(ticker=symbol, pl=pl, trades=count)
        for symbol, (pl, count) in totals.items()
    ]
    return sorted(results, key=lambda item: item.pl, reverse=True)


def get_pl_by_day_of_week(entries: list[DayEntry]) -> list[WeekdayPL]:
    """Sum P&L per weekday, always returning Sunday through Saturday."""
    buckets = [0.0] * 7
    for entry in entries:
        buckets[weekday_index(parse_entry_date(entry.id))] += entry.total_pl

    return [WeekdayPL(day=name, pl=pl) for name, pl in zip(WEEKDAY_NAMES, buckets)]


def get_pl_by_tag(entries: list[DayEntry]) -> list[TagPL]:
    """Attribute each day's full P&L to every tag on it.

    A day with several tags counts towards each of them, so the tag totals
    do not partition the overall P&L.
    """
    totals: dict[str, list] = {}

    for entry in entries:
        for tag in entry.tags:
            bucket = totals.setdefault(tag, [0.0, 0])
            bucket[0] += entry.total_pl
            bucket[1] += 1

    results = [TagPL(tag=tag, pl=pl, count=count) for tag, (pl, count) in totals.items()]
    return sorted(results, key=lambda item: item.pl, reverse=True)


def get_return_distribution(entries: list[DayEntry]) -> list[float]:
    """Flatten every per-trade percentage return into one list."""
    return [trade.percent_return for entry in entries for trade in entry.trades]


def get_return_histogram(returns: list[float], bin_size: int = 5) -> list[HistogramBin]:
    """Bin percentage returns into fixed-width buckets.

    The range always spans 0 and at least one bin. Bins are half-open
    ``[start, start + bin_size)`` except the last, which also holds values
    equal to its upper edge.

    Args:
        returns: Percentage returns, e.g. from get_return_distribution.
        bin_size: Width of each bin in percentage points.

    Returns:
        Bins in ascending order, empty when there are no returns.
    """
    if not returns or bin_size <= 0:
        return []

    lower = math.floor(min(min(returns), 0) / bin_size) * bin_size
    upper = math.ceil(max(max(returns), 0) / bin_size) * bin_size
    # Subnormal returns can round to 0 when divided
    while lower > min(returns):
        lower -= bin_size
    while upper < max(returns):
        upper += bin_size
    if upper == lower:
        upper = lower + bin_size

    bins = []
    for start in range(lower, upper, bin_size):
        end = start + bin_size
        if end == upper:
            count = sum(1 for r in returns if start <= r <= end)
        else:
            count = sum(1 for r in returns if start <= r < end)
        bins.append(HistogramBin(start=start, end=end, count=count, label=f"{start}% to {end}%"))

    return bins


# ==================== Calendar Periods ====================


def _in_month(entry: DayEntry, month: date) -> bool:
    entry_date = parse_entry_date(entry.id)
    return entry_date.year == month.year and entry_date.month == month.month


def calculate_monthly_pl(entries: list[DayEntry], month: date) -> float:
    """Sum P&L over entries in the year and month of ``month``."""
    return sum((e.total_pl for e in entries if _in_month(e, month)), 0.0)


def get_monthly_falling_knives(entries: list[DayEntry], month: date) -> int:
    """Sum falling knives over entries in the year and month of ``month``."""
    return sum(e.falling_knife_count for e in entries if _in_month(e, month))


def calculate_weekly_pl(entries: list[DayEntry]) -> float:
    """Sum P&L over the Sunday-Saturday week of the most recent entry."""
    if not entries:
        return 0.0

    latest = max(entries, key=lambda entry: entry.id)
    start, end = week_bounds(parse_entry_date(latest.id))

    return sum(
        (e.total_pl for e in entries if start <= parse_entry_date(e.id) <= end),
        0.0,
    )


def get_most_recent_month_with_data(
    entries: list[DayEntry], today: Optional[date] = None
) -> date:
    """First day of the month of the latest entry.

    Falls back to the month of ``today`` (the current date by default) when
    there are no entries.
    """
    if not entries:
        return (today or date.today()).replace(day=1)

    latest = max(entries, key=lambda entry: entry.id)
    return parse_entry_date(latest.id).replace(day=1)


def calculate_monthly_returns(entries: list[DayEntry]) -> list[MonthlyReturn]:
    """Aggregate P&L, trade count and win rate per calendar month."""
    months: dict[str, list[DayEntry]] = {}
    for entry in entries:
        months.setdefault(month_key(parse_entry_date(entry.id)), []).append(entry)

    return [
        MonthlyReturn(
            month=key,
            pl=sum((e.total_pl for e in month_entries), 0.0),
            trades=sum(e.number_of_trades for e in month_entries),
            win_rate=calculate_win_rate(month_entries),
        )
        for key, month_entries in sorted(months.items())
    ]


# ==================== Time Series ====================


def calculate_rolling_metrics(
    entries: list[DayEntry], window_size: int = 20
) -> list[RollingPoint]:
    """Cumulative P&L with trailing-window average P&L and win rate.

    Windows are clipped at the start of the series, so every entry yields a
    point.

    Args:
        entries: Day entries in any order.
        window_size: Number of trailing entries in each window.

    Returns:
        One RollingPoint per entry in chronological order.
    """
    if window_size < 1:
        return []

    ordered = sort_chronologically(entries)
    results = []
    cumulative = 0.0

    for i, entry in enumerate(ordered):
        cumulative += entry.total_pl
        window = ordered[max(0, i - window_size + 1):i + 1]

        results.append(RollingPoint(
            date=entry.id,
            avg_pl=sum(e.total_pl for e in window) / len(window),
            win_rate=calculate_win_rate(window),
            cumulative=cumulative,
        ))

    return results


def calculate_drawdown_series(entries: list[DayEntry]) -> list[DrawdownPoint]:
    """Drawdown from the running peak at every entry.

    ``drawdown`` is a percentage of the peak and stays 0 until the peak is
    positive. ``underwater`` is the currency distance below the peak.
    """
    peak = 0.0
    cumulative = 0.0
    results = []

    for entry in sort_chronologically(entries):
        cumulative += entry.total_pl
        if cumulative > peak:
            peak = cumulative

        underwater = peak - cumulative
        drawdown = underwater / peak * 100 if peak > 0 else 0.0
        results.append(DrawdownPoint(date=entry.id, drawdown=drawdown, underwater=underwater))

    return results


def calculate_volatility_series(
    entries: list[DayEntry], window_size: int = 20
) -> list[VolatilityPoint]:
    """Annualized rolling standard deviation of daily P&L.

    Only full windows are emitted: the first point is at the
    ``window_size``-th entry.
    """
    if window_size < 1:
        return []

    ordered = sort_chronologically(entries)
    results = []

    for i in range(window_size - 1, len(ordered)):
        window = [e.total_pl for e in ordered[i - window_size + 1:i + 1]]
        volatility = population_std(window) * math.sqrt(TRADING_DAYS_PER_YEAR)
        results.append(VolatilityPoint(date=ordered[i].id, volatility=volatility))

    return results


def get_consecutive_wins_losses(entries: list[DayEntry]) -> list[StreakRun]:
    """Split trading days into maximal runs of wins and losses.

    Zero-P&L days are dropped first, so they never split a run.
    """
    results = []
    run_length = 0
    run_type = None

    for entry in sort_chronologically(entries):
        if entry.total_pl == 0:
            continue
        day_type = "win" if entry.total_pl > 0 else "loss"

        if day_type == run_type:
            run_length += 1
        else:
            if run_type is not None:
                results.append(StreakRun(consecutive=run_length, type=run_type))
            run_type = day_type
            run_length = 1

    if run_type is not None:
        results.append(StreakRun(consecutive=run_length, type=run_type))

    return results
