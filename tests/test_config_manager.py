"""Tests for the QSettings-backed configuration."""
import pytest
from PyQt6.QtCore import QByteArray

from propertyanimation.utils.config_manager import ConfigManager


def test_log_level_defaults_to_info(config_manager):
    assert config_manager.get_log_level() == "INFO"


def test_log_level_round_trip(config_manager, tmp_path):
    config_manager.set_log_level("debug")
    assert config_manager.get_log_level() == "DEBUG"

    reloaded = ConfigManager(path=tmp_path / "settings.ini")
    assert reloaded.get_log_level() == "DEBUG"


def test_invalid_log_level_rejected(config_manager):
    with pytest.raises(ValueError):
        config_manager.set_log_level("verbose")


def test_invalid_stored_log_level_falls_back(config_manager):
    config_manager.settings.setValue("logging/level", "LOUD")
    assert config_manager.get_log_level() == "INFO"


def test_window_geometry_round_trip(config_manager):
    assert config_manager.get_window_geometry() is None
    geometry = QByteArray(b"\x01\x02\x03")
    config_manager.set_window_geometry(geometry)
    assert bytes(config_manager.get_window_geometry()) == b"\x01\x02\x03"
