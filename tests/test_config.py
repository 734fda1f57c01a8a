"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest
import toml

from tradelog.config import DEFAULT_CONFIG, create_template_config, get_user_settings, load_config


@pytest.fixture
def temp_dir():
    """Create a temporary config directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestLoadConfig:
    """Config files are merged over the defaults."""

    def test_missing_file_uses_defaults(self, temp_dir: Path):
        config = load_config(temp_dir / "config.toml")
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_partial_file_is_merged(self, temp_dir: Path):
        path = temp_dir / "config.toml"
        path.write_text("[analytics]\nrolling_window = 5\n\n[account]\nstarting_balance = 0.0\n")

        config = load_config(path)

        assert config["analytics"]["rolling_window"] == 5
        assert config["analytics"]["exclude_outliers"] is True
        assert config["account"]["starting_balance"] == 0.0
        assert config["account"]["net_worth"] == 10000.0

    def test_invalid_file_uses_defaults(self, temp_dir: Path):
        path = temp_dir / "config.toml"
        path.write_text("[analytics]\nrolling_window = \n")

        assert load_config(path) == DEFAULT_CONFIG

    def test_defaults_not_mutated(self, temp_dir: Path):
        config = load_config(temp_dir / "config.toml")
        config["analytics"]["rolling_window"] = 99
        assert DEFAULT_CONFIG["analytics"]["rolling_window"] == 20


class TestTemplateConfig:
    """The template config round-trips through load_config."""

    def test_create_template(self, temp_dir: Path):
        path = create_template_config(temp_dir / "nested" / "config.toml")

        assert path.exists()
        assert toml.load(path)["analytics"]["outlier_threshold"] == 10000.0
        assert load_config(path) == DEFAULT_CONFIG


class TestUserSettings:
    """UserSettings comes from the [account] section."""

    def test_from_config(self):
        settings = get_user_settings({"account": {"net_worth": 5000.0, "starting_balance": 250.0}})
        assert settings.net_worth == 5000.0
        assert settings.starting_balance == 250.0

    def test_missing_section(self):
        settings = get_user_settings({})
        assert settings.starting_balance == 10000.0
