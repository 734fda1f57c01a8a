"""Data models for TradeLog."""

from tradelog.models.day_entry import DayEntry, Trade
from tradelog.models.settings import UserSettings
from tradelog.models.stats import (
    DrawdownPoint,
    HistogramBin,
    LargestWinLoss,
    MonthlyReturn,
    PerformanceSummary,
    RiskMetrics,
    RMultiples,
    RollingPoint,
    StreakRun,
    TagPL,
    TickerPL,
    VolatilityPoint,
    WeekdayPL,
    WinLossStreaks,
)

__all__ = [
    "DayEntry",
    "Trade",
    "UserSettings",
    "DrawdownPoint",
    "HistogramBin",
    "LargestWinLoss",
    "MonthlyReturn",
    "PerformanceSummary",
    "RiskMetrics",
    "RMultiples",
    "RollingPoint",
    "StreakRun",
    "TagPL",
    "TickerPL",
    "VolatilityPoint",
    "WeekdayPL",
    "WinLossStreaks",
]
