import pytest
from pydantic import ValidationError

from wander_routes.config import Settings


def test_defaults():
    config = Settings()

    assert config.default_strategy == "balanced"
    assert config.rush_hour_ranges() == [(7, 9), (17, 19)]
    assert config.approval_apply_mode == "permutation"


def test_comma_separated_tuples():
    config = Settings(default_preferred_modes="walking, transit", rush_hour_windows="6,8")

    assert config.default_preferred_modes == ("walking", "transit")
    assert config.rush_hour_ranges() == [(6, 8)]


def test_json_arrays_from_environment(monkeypatch):
    monkeypatch.setenv("WANDER_DEFAULT_PREFERRED_MODES", '["cycling", "walking"]')
    monkeypatch.setenv("WANDER_LONG_TRAVEL_WARNING_MINUTES", "60")

    config = Settings()
    assert config.default_preferred_modes == ("cycling", "walking")
    assert config.long_travel_warning_minutes == 60


def test_rush_hour_windows_must_pair():
    with pytest.raises(ValidationError):
        Settings(rush_hour_windows=[7, 9, 17])


def test_unknown_strategy_or_apply_mode_rejected():
    with pytest.raises(ValidationError):
        Settings(default_strategy="fastest")
    with pytest.raises(ValidationError):
        Settings(approval_apply_mode="shuffle")
