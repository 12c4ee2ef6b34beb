"""Tests for configuration models and manager."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from folderlockdecrypt.config import (
    ConfigManager,
    ExportSettings,
    FolderLockConfig,
    LoggingSettings,
    get_config_manager,
)
from folderlockdecrypt.ledger import ExportFormat


class TestModels:
    """Tests for configuration models."""

    def test_defaults(self):
        config = FolderLockConfig()
        assert config.directories.input_dir is None
        assert config.export.formats == [ExportFormat.TEXT]
        assert config.export.json_indent is None
        assert config.export.utc_timestamps is True
        assert config.logging.level == "INFO"

    def test_formats_from_strings(self):
        settings = ExportSettings(formats=["json", "txt", "json"])
        assert settings.formats == [ExportFormat.JSON, ExportFormat.TEXT]

    def test_empty_formats_rejected(self):
        with pytest.raises(ValidationError):
            ExportSettings(formats=[])

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            ExportSettings(formats=["xml"])

    def test_log_level_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            FolderLockConfig(colour="red")


class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture
    def no_default_locations(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [tmp_path / "nowhere.yaml"]
        )

    def test_save_and_load_round_trip(self, tmp_path):
        path = tmp_path / "cfg" / "config.yaml"
        config = FolderLockConfig(
            directories={"input_dir": tmp_path / "in", "output_dir": tmp_path / "out"},
            export={"formats": ["txt", "json"], "json_indent": 2},
        )

        ConfigManager().save(config, path)
        loaded = ConfigManager(path).load()

        assert loaded == config
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert raw["export"]["formats"] == ["txt", "json"]
        assert raw["directories"]["input_dir"] == str(tmp_path / "in")

    def test_missing_file_raises(self, no_default_locations, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "absent.yaml").load()

    def test_missing_file_defaults(self, no_default_locations, tmp_path):
        config = ConfigManager(tmp_path / "absent.yaml").load(create_if_missing=True)
        assert config == FolderLockConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("export: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(path).load()

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(path).load()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager(path).load() == FolderLockConfig()

    def test_save_without_config(self):
        with pytest.raises(ValueError):
            ConfigManager().save()

    def test_config_property_falls_back_to_defaults(self, no_default_locations):
        assert ConfigManager().config == FolderLockConfig()


class TestGetConfigManager:
    """Tests for the global config manager accessor."""

    def test_cached(self):
        assert get_config_manager() is get_config_manager()

    def test_explicit_path_replaces_cached(self, tmp_path):
        first = get_config_manager()
        second = get_config_manager(tmp_path / "c.yaml")
        assert second is not first
        assert second.config_path == tmp_path / "c.yaml"
