"""Result models produced by the analytics engine."""

from typing import Literal
from pydantic import BaseModel, Field


class TickerPL(BaseModel):
    """P&L attributed to a single ticker."""

    ticker: str = Field(..., description="Ticker symbol")
    pl: float = Field(..., description="Attributed P&L")
    trades: int = Field(..., ge=0, description="Number of trades in the ticker")

    model_config = {"frozen": True}


class WeekdayPL(BaseModel):
    """P&L summed over one day of the week."""

    day: str = Field(..., description="Weekday name")
    pl: float = Field(..., description="Summed P&L")

    model_config = {"frozen": True}


class TagPL(BaseModel):
    """P&L attributed to a tag."""

    tag: str = Field(..., description="Tag label")
    pl: float = Field(..., description="Summed P&L of tagged days")
    count: int = Field(..., ge=0, description="Number of tagged days")

    model_config = {"frozen": True}


class HistogramBin(BaseModel):
    """One bin of the per-trade return histogram."""

    start: int = Field(..., description="Inclusive lower edge (percent)")
    end: int = Field(..., description="Upper edge (percent)")
    count: int = Field(..., ge=0, description="Returns falling in the bin")
    label: str = Field(..., description="Display label")

    model_config = {"frozen": True}


class RollingPoint(BaseModel):
    """Trailing-window statistics at one day."""

    date: str = Field(..., description="Day key (YYYY-MM-DD)")
    avg_pl: float = Field(..., description="Average P&L over the window")
    win_rate: float = Field(..., ge=0, le=100, description="Win rate over the window")
    cumulative: float = Field(..., description="Cumulative P&L to date")

    model_config = {"frozen": True}


class DrawdownPoint(BaseModel):
    """Drawdown from the running peak at one day."""

    date: str = Field(..., description="Day key (YYYY-MM-DD)")
    drawdown: float = Field(..., ge=0, description="Drawdown percentage of peak")
    underwater: float = Field(..., ge=0, description="Distance below peak")

    model_config = {"frozen": True}


class MonthlyReturn(BaseModel):
    """Aggregates for one calendar month."""

    month: str = Field(..., description="Month key (YYYY-MM)")
    pl: float = Field(..., description="Summed P&L")
    trades: int = Field(..., ge=0, description="Summed trade count")
    win_rate: float = Field(..., ge=0, le=100, description="Win rate percentage")

    model_config = {"frozen": True}


class VolatilityPoint(BaseModel):
    """Annualized rolling volatility at one day."""

    date: str = Field(..., description="Day key (YYYY-MM-DD)")
    volatility: float = Field(..., ge=0, description="Annualized volatility")

    model_config = {"frozen": True}


class StreakRun(BaseModel):
    """A maximal run of winning or losing days."""

    consecutive: int = Field(..., gt=0, description="Length of the run")
    type: Literal["win", "loss"] = Field(..., description="Run type")

    model_config = {"frozen": True}


class WinLossStreaks(BaseModel):
    """Streak statistics over trading days."""

    current_streak: int = Field(
        ..., description="Active streak (positive for wins, negative for losses)"
    )
    longest_win_streak: int = Field(..., ge=0, description="Longest win streak")
    longest_loss_streak: int = Field(..., ge=0, description="Longest loss streak")

    model_config = {"frozen": True}


class LargestWinLoss(BaseModel):
    """Largest single-day win and loss."""

    largest_win: float = Field(..., ge=0, description="Largest winning day")
    largest_loss: float = Field(..., le=0, description="Largest losing day")

    model_config = {"frozen": True}


class RMultiples(BaseModel):
    """Day outcomes expressed in multiples of the average loss."""

    avg_win_r: float = Field(..., description="Average win in R")
    avg_loss_r: float = Field(default=-1.0, description="Average loss in R")
    r_multiples: list[float] = Field(default_factory=list, description="Per-day R")

    model_config = {"frozen": True}


class RiskMetrics(BaseModel):
    """Historical value-at-risk estimates."""

    value_at_risk_95: float = Field(..., description="95% historical VaR")
    value_at_risk_99: float = Field(..., description="99% historical VaR")
    conditional_var_95: float = Field(..., description="95% conditional VaR")

    model_config = {"frozen": True}


class PerformanceSummary(BaseModel):
    """Every scalar metric of the performance dashboard."""

    cumulative_pl: float
    trading_days: int = Field(..., ge=0)
    win_rate: float = Field(..., ge=0, le=100)
    fk_win_rate: float = Field(..., ge=0, le=100)
    avg_return: float
    max_drawdown: float = Field(..., ge=0)
    profit_factor: float
    sharpe_ratio: float
    sortino_ratio: float
    calmar_ratio: float
    expectancy: float
    avg_win_loss_ratio: float
    largest_win: float
    largest_loss: float
    current_streak: int
    longest_win_streak: int = Field(..., ge=0)
    longest_loss_streak: int = Field(..., ge=0)
    recovery_factor: float
    avg_trades_per_day: float = Field(..., ge=0)
    total_falling_knives: int = Field(..., ge=0)

    model_config = {"frozen": True}
