"""Configuration loading for TradeLog.

Settings live in ``~/.config/tradelog/config.toml``. Keys missing from the
file fall back to ``DEFAULT_CONFIG``.
"""

import copy
import logging
from pathlib import Path
from typing import Optional

import toml

from tradelog.models import UserSettings

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tradelog"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_CONFIG = {
    "data": {
        "entries_path": str(CONFIG_DIR / "entries.json"),
    },
    "analytics": {
        "exclude_outliers": True,
        "outlier_threshold": 10000.0,
        "rolling_window": 20,
        "volatility_window": 20,
    },
    "account": {
        "net_worth": 10000.0,
        "starting_balance": 10000.0,
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        path: Config file path. Defaults to CONFIG_PATH.

    Returns:
        Configuration dict. Defaults are returned when the file is missing or
        cannot be parsed.
    """
    config_path = Path(path) if path else CONFIG_PATH

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        loaded = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s; using defaults", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, loaded)


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write the default configuration to ``path``."""
    config_path = Path(path) if path else CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return config_path


def get_user_settings(config: dict) -> UserSettings:
    """Build UserSettings from the ``[account]`` section."""
    account = config.get("account", {})
    return UserSettings(
        net_worth=account.get("net_worth", 10000.0),
        starting_balance=account.get("starting_balance", 10000.0),
    )
