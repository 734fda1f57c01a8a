"""Risk and risk-adjusted return metrics.

Ratios are computed on daily total P&L in currency units, not on percentage
returns. Sharpe, Sortino and rolling volatility are annualized by
``sqrt(252)``; Calmar annualizes the mean daily P&L by 252.
"""

import math

from tradelog.analytics.dates import sort_chronologically
from tradelog.analytics.metrics import average_win_loss, calculate_cumulative_pl
from tradelog.models import DayEntry, RiskMetrics, RMultiples

TRADING_DAYS_PER_YEAR = 252


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0 for an empty list."""
    if not values:
        return 0.0
    # Equal values return exactly, so a constant series has zero deviation
    if max(values) == min(values):
        return values[0]
    return sum(values) / len(values)


def population_std(values: list[float]) -> float:
    """Population standard deviation (divides by N)."""
    if not values:
        return 0.0
    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def calculate_max_drawdown(entries: list[DayEntry]) -> float:
    """Largest peak-to-trough decline of cumulative P&L, in percent.

    The running peak starts at 0. Each step divides by ``max(peak, 1)`` so a
    series that has not yet made a positive peak reports its decline against
    a unit base instead of dividing by zero.

    Args:
        entries: Day entries in any order.

    Returns:
        Maximum drawdown percentage (>= 0).
    """
    peak = 0.0
    cumulative = 0.0
    max_drawdown = 0.0

    for entry in sort_chronologically(entries):
        cumulative += entry.total_pl
        if cumulative > peak:
            peak = cumulative

        drawdown = (peak - cumulative) / max(peak, 1) * 100
        if drawdown > max_drawdown:
            max_drawdown = drawdown

    return max_drawdown


def calculate_sharpe_ratio(entries: list[DayEntry]) -> float:
    """Annualized Sharpe ratio of daily P&L (zero risk-free rate)."""
    if not entries:
        return 0.0

    returns = [entry.total_pl for entry in sort_chronologically(entries)]
    std = population_std(returns)
    if std == 0:
        return 0.0
    return mean(returns) / std * math.sqrt(TRADING_DAYS_PER_YEAR)


def calculate_sortino_ratio(entries: list[DayEntry]) -> float:
    """Annualized Sortino ratio of daily P&L.

    Downside deviation sums squared deviations of the returns strictly below
    the mean, but divides by the full sample size.
    """
    if not entries:
        return 0.0

    returns = [entry.total_pl for entry in sort_chronologically(entries)]
    avg = mean(returns)

    downside = [r for r in returns if r < avg]
    if not downside:
        return math.inf if avg > 0 else 0.0

    downside_variance = sum((r - avg) ** 2 for r in downside) / len(returns)
    downside_deviation = math.sqrt(downside_variance)
    if downside_deviation == 0:
        return math.inf if avg > 0 else 0.0

    return avg / downside_deviation * math.sqrt(TRADING_DAYS_PER_YEAR)


def calculate_recovery_factor(entries: list[DayEntry]) -> float:
    """Net profit divided by the maximum drawdown percentage."""
    net_profit = calculate_cumulative_pl(entries)
    max_drawdown = calculate_max_drawdown(entries)

    if max_drawdown == 0:
        return math.inf if net_profit > 0 else 0.0
    return net_profit / max_drawdown


def calculate_calmar_ratio(entries: list[DayEntry]) -> float:
    """Annualized P&L estimate divided by the maximum drawdown percentage."""
    if not entries:
        return 0.0

    annualized = calculate_cumulative_pl(entries) / len(entries) * TRADING_DAYS_PER_YEAR
    max_drawdown = calculate_max_drawdown(entries)

    if max_drawdown == 0:
        return math.inf if annualized > 0 else 0.0
    return annualized / max_drawdown


def calculate_r_multiples(entries: list[DayEntry]) -> RMultiples:
    """Express each day's P&L in units of the average loss (R).

    When there are no losing days the unit falls back to 1, so R-multiples
    equal the raw P&L. The average loss is -1R by definition.

    Args:
        entries: Day entries; the output keeps their order.

    Returns:
        RMultiples with the average win in R and one R value per entry.
    """
    avg_win, avg_loss = average_win_loss(entries)
    if not any(entry.total_pl < 0 for entry in entries):
        avg_loss = 1.0

    r_multiples = [
        entry.total_pl / avg_loss if avg_loss != 0 else 0.0 for entry in entries
    ]
    return RMultiples(
        avg_win_r=avg_win / avg_loss if avg_loss > 0 else 0.0,
        avg_loss_r=-1.0,
        r_multiples=r_multiples,
    )


def calculate_risk_metrics(entries: list[DayEntry]) -> RiskMetrics:
    """Historical value-at-risk over daily P&L.

    Entries are ranked by P&L ascending. VaR at 95%/99% is the P&L at index
    ``floor(n * 0.05)`` / ``floor(n * 0.01)``. Conditional VaR is the mean P&L
    of every entry ranked at or below the 95% index.
    """
    ranked = sorted(entry.total_pl for entry in entries)
    if not ranked:
        return RiskMetrics(value_at_risk_95=0.0, value_at_risk_99=0.0, conditional_var_95=0.0)

    index_95 = math.floor(len(ranked) * 0.05)
    index_99 = math.floor(len(ranked) * 0.01)

    return RiskMetrics(
        value_at_risk_95=ranked[index_95],
        value_at_risk_99=ranked[index_99],
        conditional_var_95=mean(ranked[: index_95 + 1]),
    )
