"""
Tests for configuration settings.

Modified: 2026-10-17
"""

import pytest
import yaml
from pathlib import Path
from packpick.core.exceptions import ConfigurationError
from packpick.config.settings import (
    Settings,
    PickerSettings,
    ScanSettings,
    DisplaySettings,
    LoggingSettings,
)


def write_config(path: Path, data) -> Path:
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestSettings:
    """Test Settings class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        settings = Settings()

        assert settings.picker.languages == ["Python"]
        assert settings.picker.architectures == ["arm64", "x86_64"]
        assert settings.scan.directory is None
        assert settings.scan.extension == "txt"
        assert settings.display.highlight_symbol == ">> "
        assert settings.logging.level == "WARNING"
        assert settings.logging.file is None

    def test_load_from_file(self, tmp_path):
        """Test loading settings from YAML file."""
        config_file = write_config(
            tmp_path / "config.yaml",
            {
                "picker": {"architectures": ["aarch64", "riscv64", "x86_64"]},
                "scan": {"directory": "/srv/notes", "extension": ".md"},
                "display": {"highlight_symbol": "> "},
                "logging": {"level": "debug", "file": "/tmp/packpick.log"},
            },
        )

        settings = Settings.load(config_file)

        assert settings.picker.languages == ["Python"]
        assert settings.picker.architectures == ["aarch64", "riscv64", "x86_64"]
        assert settings.scan.directory == "/srv/notes"
        assert settings.scan.extension == "md"
        assert settings.display.highlight_symbol == "> "
        assert settings.display.highlight_color == "bright_green"
        assert settings.logging.level == "DEBUG"
        assert settings.logging.file == "/tmp/packpick.log"

    def test_load_with_missing_file(self):
        """Test loading with non-existent config file."""
        settings = Settings.load(Path("/nonexistent/config.yaml"))

        assert settings.picker.architectures == ["arm64", "x86_64"]

    def test_load_default_location(self, isolated_home):
        """Without a path the file under ~/.config/packpick is used."""
        config_dir = isolated_home / ".config" / "packpick"
        config_dir.mkdir(parents=True)
        write_config(config_dir / "config.yaml", {"picker": {"languages": ["Python", "Go"]}})

        settings = Settings.load()

        assert settings.picker.languages == ["Python", "Go"]

    def test_empty_file(self, tmp_path):
        """An empty file means defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Settings.load(config_file).to_dict() == Settings().to_dict()

    def test_environment_variable_override(self, monkeypatch, tmp_path):
        """Test that environment variables override config file."""
        config_file = write_config(
            tmp_path / "config.yaml",
            {"logging": {"level": "INFO", "file": "from_file.log"}},
        )

        monkeypatch.setenv("PACKPICK_LOG_LEVEL", "error")
        monkeypatch.setenv("PACKPICK_LOG_FILE", "from_env.log")

        settings = Settings.load(config_file)

        assert settings.logging.level == "ERROR"
        assert settings.logging.file == "from_env.log"

    @pytest.mark.parametrize(
        "data",
        [
            {"picker": {"languages": []}},
            {"picker": {"architectures": "arm64"}},
            {"picker": {"architectures": ["arm64", 64]}},
            {"picker": ["arm64"]},
            {"logging": {"level": "LOUD"}},
            ["not", "a", "mapping"],
        ],
    )
    def test_invalid_config(self, tmp_path, data):
        """Invalid content raises ConfigurationError."""
        config_file = write_config(tmp_path / "config.yaml", data)

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_unparseable_yaml(self, tmp_path):
        """Broken YAML raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("picker: [unclosed\n")

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_invalid_env_level(self, monkeypatch):
        """An unknown level from the environment is rejected."""
        monkeypatch.setenv("PACKPICK_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError):
            Settings.load(Path("/nonexistent/config.yaml"))

    def test_to_dict(self):
        """Test converting settings to dictionary."""
        settings_dict = Settings().to_dict()

        assert set(settings_dict) == {"picker", "scan", "display", "logging"}
        assert settings_dict["picker"]["architectures"] == ["arm64", "x86_64"]
        assert settings_dict["scan"]["extension"] == "txt"
        assert settings_dict["logging"]["level"] == "WARNING"


class TestIndividualSettings:
    """Test individual settings dataclasses."""

    def test_picker_settings(self):
        settings = PickerSettings(languages=["Rust"])

        assert settings.languages == ["Rust"]
        assert settings.architectures == ["arm64", "x86_64"]

    def test_defaults_not_shared(self):
        """Default lists are per instance."""
        first = PickerSettings()
        first.languages.append("Go")

        assert PickerSettings().languages == ["Python"]

    def test_scan_settings(self):
        settings = ScanSettings(directory="/tmp", extension="md")

        assert settings.directory == "/tmp"
        assert settings.extension == "md"

    def test_display_settings(self):
        settings = DisplaySettings(highlight_color="blue")

        assert settings.highlight_symbol == ">> "
        assert settings.highlight_color == "blue"

    def test_logging_settings(self):
        settings = LoggingSettings(level="DEBUG")

        assert settings.level == "DEBUG"
        assert settings.file is None
