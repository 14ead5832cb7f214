# =============================================================================
# File: test_appsettings_validation.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

from unittest.mock import patch

import pytest

from copywriter.config.appsettings import AppSettings, LicenseConfig, OutputConfig, WalkerConfig
from copywriter.config.config_loader import ConfigLoader
from copywriter.exceptions.custom_exceptions import ConfigurationError


def test_appsettings_defaults():
    settings = AppSettings()
    assert settings.walker.max_file_size == 1_000_000
    assert ".git" in settings.walker.skip_dirs
    assert settings.license.file_names[0] == "LICENSE"
    assert settings.output.diff_context_lines == 3


def test_walker_rejects_non_positive_size():
    with pytest.raises(ValueError):
        WalkerConfig(max_file_size=0)


def test_license_config_rejects_empty_names():
    with pytest.raises(ValueError):
        LicenseConfig(file_names=["", "  "])


def test_license_config_rejects_zero_depth():
    with pytest.raises(ValueError):
        LicenseConfig(max_search_depth=0)


def test_output_config_rejects_negative_context():
    with pytest.raises(ValueError):
        OutputConfig(diff_context_lines=-1)


class TestConfigLoader:

    def test_loads_packaged_settings(self, monkeypatch):
        monkeypatch.delenv("COPYWRITER_MAX_FILE_SIZE", raising=False)
        monkeypatch.delenv("COPYWRITER_ENV", raising=False)
        settings = ConfigLoader.get_app_settings(reload=True)
        assert settings.app.name == "Copywriter"
        assert settings.walker.max_file_size == 1_000_000
        assert "node_modules" in settings.walker.skip_dirs

    def test_settings_are_cached(self):
        first = ConfigLoader.get_app_settings()
        assert ConfigLoader.get_app_settings() is first

    def test_env_overrides_max_file_size(self, monkeypatch):
        monkeypatch.setenv("COPYWRITER_MAX_FILE_SIZE", "42")
        assert ConfigLoader.get_app_settings(reload=True).walker.max_file_size == 42

    def test_env_override_must_be_integer(self, monkeypatch):
        monkeypatch.setenv("COPYWRITER_MAX_FILE_SIZE", "big")
        with pytest.raises(ConfigurationError):
            ConfigLoader.get_app_settings(reload=True)

    def test_env_debug_mode(self, monkeypatch):
        monkeypatch.setenv("COPYWRITER_DEBUG_MODE", "1")
        assert ConfigLoader.get_app_settings(reload=True).app.debug is True

    @patch("copywriter.config.config_loader.os.path.exists")
    def test_missing_config_file(self, mock_exists):
        mock_exists.return_value = False
        with pytest.raises(ConfigurationError):
            ConfigLoader.get_app_settings(reload=True)

    @patch("copywriter.config.config_loader.ConfigLoader._load_config_data")
    def test_invalid_config_values(self, mock_load):
        mock_load.return_value = {"walker": {"max_file_size": -5}}
        with pytest.raises(ConfigurationError):
            ConfigLoader.get_app_settings(reload=True)
