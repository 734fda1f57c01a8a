"""TradeLog - daily P&L journal and performance analytics."""

__version__ = "0.1.0"
