"""Dashboard summary built from the individual metric functions."""

from tradelog.analytics.metrics import (
    calculate_average_return,
    calculate_average_trades_per_day,
    calculate_avg_win_loss_ratio,
    calculate_cumulative_pl,
    calculate_expectancy,
    calculate_fk_win_rate,
    calculate_profit_factor,
    calculate_win_rate,
    get_largest_win_loss,
    get_total_falling_knives,
    get_win_loss_streaks,
)
from tradelog.analytics.risk import (
    calculate_calmar_ratio,
    calculate_max_drawdown,
    calculate_recovery_factor,
    calculate_sharpe_ratio,
    calculate_sortino_ratio,
)
from tradelog.models import DayEntry, PerformanceSummary


def calculate_performance_summary(entries: list[DayEntry]) -> PerformanceSummary:
    """Compute every scalar dashboard metric over ``entries``.

    Outlier filtering is left to the caller.
    """
    largest = get_largest_win_loss(entries)
    streaks = get_win_loss_streaks(entries)

    return PerformanceSummary(
        cumulative_pl=calculate_cumulative_pl(entries),
        trading_days=sum(1 for entry in entries if entry.total_pl != 0),
        win_rate=calculate_win_rate(entries),
        fk_win_rate=calculate_fk_win_rate(entries),
        avg_return=calculate_average_return(entries),
        max_drawdown=calculate_max_drawdown(entries),
        profit_factor=calculate_profit_factor(entries),
        sharpe_ratio=calculate_sharpe_ratio(entries),
        sortino_ratio=calculate_sortino_ratio(entries),
        calmar_ratio=calculate_calmar_ratio(entries),
        expectancy=calculate_expectancy(entries),
        avg_win_loss_ratio=calculate_avg_win_loss_ratio(entries),
        largest_win=largest.largest_win,
        largest_loss=largest.largest_loss,
        current_streak=streaks.current_streak,
        longest_win_streak=streaks.longest_win_streak,
        longest_loss_streak=streaks.longest_loss_streak,
        recovery_factor=calculate_recovery_factor(entries),
        avg_trades_per_day=calculate_average_trades_per_day(entries),
        total_falling_knives=get_total_falling_knives(entries),
    )
