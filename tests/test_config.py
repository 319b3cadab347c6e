"""Tests for environment-driven configuration."""

import pytest

from periodpicker.config import PickerConfig, load_config
from periodpicker.period import default_periods
from periodpicker.picker import PeriodListController


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "PERIODPICKER_CUSTOM_LABEL",
        "PERIODPICKER_MATCH_THRESHOLD",
        "PERIODPICKER_SHOW_TIME",
        "PERIODPICKER_24H",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """Test PERIODPICKER_* variables"""

    def test_defaults(self):
        assert load_config() == PickerConfig()
        assert load_config().custom_label == "Custom"
        assert load_config().match_threshold == 80

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_CUSTOM_LABEL", "Own range")
        monkeypatch.setenv("PERIODPICKER_MATCH_THRESHOLD", "65")
        monkeypatch.setenv("PERIODPICKER_SHOW_TIME", "yes")
        monkeypatch.setenv("PERIODPICKER_24H", "1")

        config = load_config()
        assert config == PickerConfig(
            custom_label="Own range",
            match_threshold=65,
            show_time=True,
            use_24_hour_format=True,
        )

    def test_false_flags(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_SHOW_TIME", "off")
        assert load_config().show_time is False

    def test_empty_label_uses_default(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_CUSTOM_LABEL", "")
        assert load_config().custom_label == "Custom"

    def test_bad_threshold(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_MATCH_THRESHOLD", "high")
        with pytest.raises(ValueError, match="PERIODPICKER_MATCH_THRESHOLD"):
            load_config()

    def test_threshold_out_of_range(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_MATCH_THRESHOLD", "150")
        with pytest.raises(ValueError):
            load_config()

    def test_bad_flag(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_24H", "maybe")
        with pytest.raises(ValueError, match="PERIODPICKER_24H"):
            load_config()


class TestConfigDrivesPresets:
    """Test that time display settings reach the preset list"""

    def test_env_flags_apply_to_default_periods(self, monkeypatch):
        monkeypatch.setenv("PERIODPICKER_SHOW_TIME", "true")
        monkeypatch.setenv("PERIODPICKER_24H", "true")

        controller = PeriodListController(config=load_config())
        controller.set_items(default_periods())
        selected = controller.current_selection()

        assert selected.show_time is True
        assert selected.use_24_hour_format is True

    def test_explicit_config(self):
        periods = default_periods(config=PickerConfig(show_time=True))
        assert all(p.show_time for p in periods)
        assert not any(p.use_24_hour_format for p in periods)

    def test_keyword_overrides_config(self):
        periods = default_periods(show_time=False, config=PickerConfig(show_time=True, use_24_hour_format=True))
        assert not any(p.show_time for p in periods)
        assert all(p.use_24_hour_format for p in periods)

    def test_defaults_without_env(self):
        assert not any(p.show_time or p.use_24_hour_format for p in default_periods())
