"""CLI commands for TradeLog.

This package provides the command-line display layer over the analytics
engine: summaries, breakdown tables and risk series.
"""

from tradelog.cli.main import cli, main

__all__ = ["cli", "main"]
