"""Performance analytics over daily P&L entries."""

from tradelog.analytics.formatting import format_currency, format_percent
from tradelog.analytics.metrics import (
    OUTLIER_THRESHOLD,
    calculate_adjusted_pl,
    calculate_average_return,
    calculate_average_trades_per_day,
    calculate_avg_win_loss_ratio,
    calculate_cumulative_pl,
    calculate_expectancy,
    calculate_fk_win_rate,
    calculate_profit_factor,
    calculate_win_rate,
    filter_outliers,
    get_largest_win_loss,
    get_pl_status,
    get_total_falling_knives,
    get_win_loss_streaks,
)
from tradelog.analytics.risk import (
    TRADING_DAYS_PER_YEAR,
    calculate_calmar_ratio,
    calculate_max_drawdown,
    calculate_r_multiples,
    calculate_recovery_factor,
    calculate_risk_metrics,
    calculate_sharpe_ratio,
    calculate_sortino_ratio,
)
from tradelog.analytics.series import (
    calculate_drawdown_series,
    calculate_monthly_pl,
    calculate_monthly_returns,
    calculate_rolling_metrics,
    calculate_volatility_series,
    calculate_weekly_pl,
    get_consecutive_wins_losses,
    get_monthly_falling_knives,
    get_most_recent_month_with_data,
    get_pl_by_day_of_week,
    get_pl_by_tag,
    get_pl_by_ticker,
    get_return_distribution,
    get_return_histogram,
)
from tradelog.analytics.summary import calculate_performance_summary

__all__ = [
    "OUTLIER_THRESHOLD",
    "TRADING_DAYS_PER_YEAR",
    "calculate_adjusted_pl",
    "calculate_average_return",
    "calculate_average_trades_per_day",
    "calculate_avg_win_loss_ratio",
    "calculate_calmar_ratio",
    "calculate_cumulative_pl",
    "calculate_drawdown_series",
    "calculate_expectancy",
    "calculate_fk_win_rate",
    "calculate_max_drawdown",
    "calculate_monthly_pl",
    "calculate_monthly_returns",
    "calculate_performance_summary",
    "calculate_profit_factor",
    "calculate_r_multiples",
    "calculate_recovery_factor",
    "calculate_risk_metrics",
    "calculate_rolling_metrics",
    "calculate_sharpe_ratio",
    "calculate_sortino_ratio",
    "calculate_volatility_series",
    "calculate_weekly_pl",
    "calculate_win_rate",
    "filter_outliers",
    "format_currency",
    "format_percent",
    "get_consecutive_wins_losses",
    "get_largest_win_loss",
    "get_monthly_falling_knives",
    "get_most_recent_month_with_data",
    "get_pl_by_day_of_week",
    "get_pl_by_tag",
    "get_pl_by_ticker",
    "get_pl_status",
    "get_return_distribution",
    "get_return_histogram",
    "get_total_falling_knives",
    "get_win_loss_streaks",
]
