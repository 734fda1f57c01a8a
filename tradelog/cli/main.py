"""Main CLI entry point for TradeLog.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when the command is invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


# Define lazy subcommands mapping
LAZY_SUBCOMMANDS = {
    "init": "tradelog.cli.configure",
    "summary": "tradelog.cli.report",
    "month": "tradelog.cli.report",
    "week": "tradelog.cli.report",
    "tickers": "tradelog.cli.breakdown",
    "weekdays": "tradelog.cli.breakdown",
    "tags": "tradelog.cli.breakdown",
    "distribution": "tradelog.cli.breakdown",
    "monthly": "tradelog.cli.breakdown",
    "drawdown": "tradelog.cli.risk",
    "rolling": "tradelog.cli.risk",
    "volatility": "tradelog.cli.risk",
    "streaks": "tradelog.cli.risk",
    "risk": "tradelog.cli.risk",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradelog")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.config/tradelog/config.toml).",
)
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON export of day entries (overrides data.entries_path).",
)
@click.option(
    "--include-outliers",
    is_flag=True,
    default=False,
    help="Keep days at or above the outlier threshold.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable info logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    data_path: Optional[Path],
    include_outliers: bool,
    verbose: bool,
) -> None:
    """TradeLog - daily P&L journal analytics.

    Reads day entries exported from the journal and reports win rate,
    drawdown, risk ratios, streaks and P&L breakdowns.

    \b
    Quick Start:
      tradelog init                          # Write a config template
      tradelog --data entries.json summary   # Performance summary
      tradelog tickers --limit 10            # Top tickers by P&L
    """
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["data_path"] = data_path
    ctx.obj["include_outliers"] = include_outliers


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
