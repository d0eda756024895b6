"""Unit tests for settings loading."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from challenge_tracker.config import Settings
from challenge_tracker.engine import OddsRule


def make_settings(tmp_path, **overrides) -> Settings:
    return Settings(_env_file=None, data_dir=tmp_path, **overrides)


def test_defaults(tmp_path):
    settings = make_settings(tmp_path)

    assert settings.challenge.odds_rule == OddsRule.CHALLENGE_CEILING
    assert settings.challenge.min_odds == Decimal("1.01")
    assert settings.habits.monthly_limit_cap == Decimal("10000")
    assert settings.database_auto_create is True


def test_cors_origins_split(tmp_path):
    settings = make_settings(
        tmp_path, allowed_origins="http://a.example, http://b.example,"
    )
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_log_level_normalized(tmp_path):
    assert make_settings(tmp_path, log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        make_settings(tmp_path, log_level="chatty")


def test_nested_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("CHALLENGE__ODDS_RULE", "fixed-cap")
    monkeypatch.setenv("HABITS__DEFAULT_ALERT_THRESHOLD", "90")

    settings = make_settings(tmp_path)

    assert settings.challenge.odds_rule == OddsRule.FIXED_CAP
    assert settings.habits.default_alert_threshold == 90


def test_yaml_overlay(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "challenge:\n"
        "  odds_rule: fixed-cap\n"
        "  fixed_odds_cap: '1.50'\n"
        "habits:\n"
        "  default_daily_limit: 250\n"
    )
    settings = make_settings(tmp_path)
    settings.load_yaml_config()

    assert settings.challenge.odds_rule == OddsRule.FIXED_CAP
    assert settings.challenge.fixed_odds_cap == Decimal("1.50")
    assert settings.challenge.min_odds == Decimal("1.01")
    assert settings.habits.default_daily_limit == Decimal("250")


def test_missing_yaml_keeps_defaults(tmp_path):
    settings = make_settings(tmp_path)
    settings.load_yaml_config()
    assert settings.challenge.odds_rule == OddsRule.CHALLENGE_CEILING


def test_yaml_odds_written_as_floats(tmp_path):
    (tmp_path / "config.yaml").write_text("challenge:\n  fixed_odds_cap: 1.3\n")
    settings = make_settings(tmp_path)
    settings.load_yaml_config()

    assert settings.challenge.fixed_odds_cap == Decimal("1.3")
