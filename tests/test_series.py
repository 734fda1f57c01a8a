"""Property-based tests for grouping and time-series functions.

Rolling statistics are validated against pandas as a reference
implementation.
"""

import math
from datetime import date, timedelta

import pandas as pd
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradelog.analytics import (
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
    get_win_loss_streaks,
)
from tradelog.models import DayEntry, Trade


def make_entry(entry_id: str, total_pl: float, **kwargs) -> DayEntry:
    """Create a day entry; extra fields are passed through."""
    return DayEntry(id=entry_id, total_pl=total_pl, **kwargs)


def make_series(pls: list[float], start: date = date(2024, 1, 1)) -> list[DayEntry]:
    """One entry per consecutive day, in the given order."""
    return [
        make_entry((start + timedelta(days=i)).isoformat(), pl)
        for i, pl in enumerate(pls)
    ]


pl_values = st.lists(
    st.integers(min_value=-5000, max_value=5000).map(float),
    max_size=80,
)


class TestPLByTicker:
    """Per-ticker attribution splits each day's P&L across its trades."""

    def test_even_split_and_sort(self):
        entries = [
            make_entry("2024-01-01", 100.0, trades=[
                Trade(symbol="AAPL", percent_return=1.0),
                Trade(symbol="TSLA", percent_return=2.0),
            ]),
            make_entry("2024-01-02", -30.0, trades=[Trade(symbol="AAPL", percent_return=-1.0)]),
            make_entry("2024-01-03", 500.0),
        ]
        result = get_pl_by_ticker(entries)

        assert [(r.ticker, r.pl, r.trades) for r in result] == [
            ("TSLA", 50.0, 1),
            ("AAPL", 20.0, 2),
        ]

    def test_symbols_are_case_sensitive(self):
        entries = [make_entry("2024-01-01", 10.0, trades=[
            Trade(symbol="AAPL", percent_return=1.0),
            Trade(symbol="aapl", percent_return=1.0),
        ])]
        assert {r.ticker for r in get_pl_by_ticker(entries)} == {"AAPL", "aapl"}

    def test_empty(self):
        assert get_pl_by_ticker([]) == []


class TestPLByDayOfWeek:
    """
    **Feature: trade-journal-analytics, Property 10: Seven Weekday Buckets**

    *For any* collection, the weekday breakdown has exactly 7 entries in
    Sunday-first order.
    """

    @given(pls=pl_values)
    @settings(max_examples=50)
    def test_always_seven_buckets(self, pls: list[float]):
        result = get_pl_by_day_of_week(make_series(pls))
        assert [r.day for r in result] == [
            "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
        ]
        assert sum(r.pl for r in result) == sum(pls)

    def test_empty_is_all_zero(self):
        result = get_pl_by_day_of_week([])
        assert len(result) == 7
        assert all(r.pl == 0 for r in result)

    def test_buckets(self):
        entries = [
            make_entry("2024-01-01", 100.0),  # Monday
            make_entry("2024-01-07", 50.0),  # Sunday
            make_entry("2024-01-08", -20.0),  # Monday
        ]
        result = {r.day: r.pl for r in get_pl_by_day_of_week(entries)}

        assert result["Monday"] == 80.0
        assert result["Sunday"] == 50.0
        assert result["Saturday"] == 0


class TestPLByTag:
    """Tag attribution counts a day's full P&L towards each of its tags."""

    def test_multi_tag_days_count_twice(self):
        entries = [
            make_entry("2024-01-01", 100.0, tags=["breakout", "morning"]),
            make_entry("2024-01-02", -40.0, tags=["breakout"]),
        ]
        result = get_pl_by_tag(entries)

        assert [(r.tag, r.pl, r.count) for r in result] == [
            ("morning", 100.0, 1),
            ("breakout", 60.0, 2),
        ]


class TestReturnDistribution:
    """Per-trade returns and histogram binning."""

    def test_flattens_all_trades(self):
        entries = [
            make_entry("2024-01-01", 10.0, trades=[
                Trade(symbol="AAPL", percent_return=3.5),
                Trade(symbol="MSFT", percent_return=-1.25),
            ]),
            make_entry("2024-01-02", 10.0, trades=[Trade(symbol="NVDA", percent_return=12.0)]),
        ]
        assert sorted(get_return_distribution(entries)) == [-1.25, 3.5, 12.0]

    def test_histogram_bins(self):
        bins = get_return_histogram([-3.0, 2.0, 7.0, 10.0])

        assert [(b.start, b.end, b.count) for b in bins] == [
            (-5, 0, 1),
            (0, 5, 1),
            (5, 10, 2),
        ]
        assert bins[0].label == "-5% to 0%"

    def test_histogram_spans_zero(self):
        bins = get_return_histogram([12.0])
        assert bins[0].start == 0
        assert bins[-1].end == 15

    def test_histogram_empty(self):
        assert get_return_histogram([]) == []
        assert get_return_histogram([1.0], bin_size=0) == []

    @given(returns=st.lists(
        st.floats(min_value=-100, max_value=100, allow_nan=False, allow_infinity=False),
        min_size=1,
        max_size=50,
    ))
    @settings(max_examples=100)
    def test_every_return_binned_once(self, returns: list[float]):
        bins = get_return_histogram(returns)
        assert sum(b.count for b in bins) == len(returns)


class TestCalendarPeriods:
    """Monthly and weekly P&L selection."""

    def test_monthly_pl(self):
        entries = [
            make_entry("2024-01-31", 100.0, falling_knives=1),
            make_entry("2024-02-01", 50.0, falling_knives=2),
            make_entry("2024-02-15", -20.0),
            make_entry("2023-02-10", 999.0, falling_knives=5),
        ]
        february = date(2024, 2, 20)

        assert calculate_monthly_pl(entries, february) == 30.0
        assert get_monthly_falling_knives(entries, february) == 2
        assert calculate_monthly_pl([], february) == 0

    def test_weekly_pl_uses_latest_week(self):
        entries = [
            make_entry("2024-01-06", 500.0),  # Saturday of the previous week
            make_entry("2024-01-07", 100.0),  # Sunday
            make_entry("2024-01-10", -40.0),  # Wednesday, latest entry
        ]
        assert calculate_weekly_pl(entries) == 60.0

    def test_weekly_pl_includes_saturday(self):
        entries = [
            make_entry("2024-01-07", 100.0),
            make_entry("2024-01-13", 25.0),
        ]
        assert calculate_weekly_pl(entries) == 125.0

    def test_weekly_pl_empty(self):
        assert calculate_weekly_pl([]) == 0

    def test_most_recent_month(self):
        entries = make_series([1.0, 2.0], start=date(2024, 3, 30))
        assert get_most_recent_month_with_data(entries) == date(2024, 3, 31).replace(day=1)
        assert get_most_recent_month_with_data(
            make_series([1.0], start=date(2024, 4, 1)) + entries
        ) == date(2024, 4, 1)

    def test_most_recent_month_defaults_to_today(self):
        assert get_most_recent_month_with_data([], today=date(2025, 7, 19)) == date(2025, 7, 1)
        assert get_most_recent_month_with_data([]).day == 1

    def test_monthly_returns(self):
        entries = [
            make_entry("2024-02-01", 50.0, number_of_trades=2),
            make_entry("2024-01-02", 100.0, number_of_trades=1),
            make_entry("2024-01-03", -50.0, number_of_trades=3),
            make_entry("2024-01-04", 0.0, number_of_trades=0),
        ]
        result = calculate_monthly_returns(entries)

        assert [r.month for r in result] == ["2024-01", "2024-02"]
        assert result[0].pl == 50.0
        assert result[0].trades == 4
        assert result[0].win_rate == 50.0
        assert result[1].win_rate == 100.0


class TestRollingMetrics:
    """
    **Feature: trade-journal-analytics, Property 11: Rolling Window Accuracy**

    *For any* series, the rolling average matches pandas' clipped rolling
    mean and the cumulative column matches the running sum.
    """

    def test_known_values(self):
        points = calculate_rolling_metrics(make_series([100.0, -50.0, 0.0, 30.0]), window_size=2)

        assert [(p.avg_pl, p.win_rate, p.cumulative) for p in points] == [
            (100.0, 100.0, 100.0),
            (25.0, 50.0, 50.0),
            (-25.0, 0.0, 50.0),
            (15.0, 100.0, 80.0),
        ]

    @given(pls=pl_values, window=st.integers(min_value=1, max_value=30))
    @settings(max_examples=100, deadline=None)
    def test_matches_pandas(self, pls: list[float], window: int):
        points = calculate_rolling_metrics(make_series(pls), window_size=window)
        series = pd.Series(pls, dtype=float)
        ref_avg = series.rolling(window, min_periods=1).mean()
        ref_cum = series.cumsum()

        assert len(points) == len(pls)
        for i, point in enumerate(points):
            assert point.avg_pl == pytest.approx(ref_avg.iloc[i], abs=1e-6)
            assert point.cumulative == pytest.approx(ref_cum.iloc[i])
            assert 0 <= point.win_rate <= 100

    def test_invalid_window(self):
        assert calculate_rolling_metrics(make_series([1.0]), window_size=0) == []


class TestVolatilitySeries:
    """
    **Feature: trade-journal-analytics, Property 12: Volatility Accuracy**

    *For any* series, rolling volatility matches pandas' population rolling
    standard deviation scaled by sqrt(252), for full windows only.
    """

    @given(pls=pl_values, window=st.integers(min_value=1, max_value=30))
    @settings(max_examples=100, deadline=None)
    def test_matches_pandas(self, pls: list[float], window: int):
        entries = make_series(pls)
        points = calculate_volatility_series(entries, window_size=window)
        ref = pd.Series(pls, dtype=float).rolling(window).std(ddof=0) * math.sqrt(252)

        assert len(points) == max(0, len(pls) - window + 1)
        for offset, point in enumerate(points):
            i = offset + window - 1
            assert point.date == entries[i].id
            assert point.volatility == pytest.approx(ref.iloc[i], rel=1e-6, abs=1e-4)

    def test_short_series_is_empty(self):
        assert calculate_volatility_series(make_series([1.0, 2.0]), window_size=3) == []


class TestDrawdownSeries:
    """Drawdown series emits every step of the peak walk."""

    def test_steps(self):
        points = calculate_drawdown_series(make_series([100.0, -25.0, -25.0, 100.0]))

        assert [(p.drawdown, p.underwater) for p in points] == [
            (0.0, 0.0),
            (25.0, 25.0),
            (50.0, 50.0),
            (0.0, 0.0),
        ]

    def test_no_positive_peak(self):
        points = calculate_drawdown_series(make_series([-50.0, 20.0]))

        assert [(p.drawdown, p.underwater) for p in points] == [(0.0, 50.0), (0.0, 30.0)]

    def test_empty(self):
        assert calculate_drawdown_series([]) == []


class TestConsecutiveRuns:
    """
    **Feature: trade-journal-analytics, Property 13: Run Segmentation**

    *For any* collection, run lengths sum to the number of trading days and
    the longest runs match the streak statistics.
    """

    def test_known_sequence(self):
        runs = get_consecutive_wins_losses(make_series([100.0, 50.0, 0.0, -30.0, -10.0, -5.0, 20.0]))

        assert [(r.consecutive, r.type) for r in runs] == [(2, "win"), (3, "loss"), (1, "win")]

    @given(pls=pl_values)
    @settings(max_examples=100)
    def test_runs_agree_with_streaks(self, pls: list[float]):
        entries = make_series(pls)
        runs = get_consecutive_wins_losses(entries)
        streaks = get_win_loss_streaks(entries)

        assert sum(r.consecutive for r in runs) == sum(1 for p in pls if p != 0)
        assert max((r.consecutive for r in runs if r.type == "win"), default=0) == streaks.longest_win_streak
        assert max((r.consecutive for r in runs if r.type == "loss"), default=0) == streaks.longest_loss_streak
        for previous, current in zip(runs, runs[1:]):
            assert previous.type != current.type
