"""
Configuration management for packpick.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-17
"""

import logging
import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional

from packpick.core.exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PickerSettings:
    """Items offered by the selection panels."""

    languages: List[str] = field(default_factory=lambda: ["Python"])
    architectures: List[str] = field(default_factory=lambda: ["arm64", "x86_64"])


@dataclass
class ScanSettings:
    """Txt Files panel settings."""

    directory: Optional[str] = None  # None = working directory at render time
    extension: str = "txt"


@dataclass
class DisplaySettings:
    """Look of the highlighted row."""

    highlight_symbol: str = ">> "
    highlight_color: str = "bright_green"


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[str] = None


def _string_list(section: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = section.get(key, default)
    if not isinstance(value, list) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty list")
    if not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"'{key}' must contain only strings")
    return list(value)


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' section must be a mapping")
    return section


def _log_level(level: Any) -> str:
    normalized = str(level).upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level}")
    return normalized


@dataclass
class Settings:
    """Main settings container."""

    picker: PickerSettings = field(default_factory=PickerSettings)
    scan: ScanSettings = field(default_factory=ScanSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/packpick/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the config file content is invalid
        """
        settings = cls()

        # Load from config file
        if config_path is None:
            config_dir = Path.home() / ".config" / "packpick"
            config_path = config_dir / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"{config_path} must contain a mapping")

            # Picker settings
            if "picker" in config_data:
                picker = _section(config_data, "picker")
                settings.picker = PickerSettings(
                    languages=_string_list(picker, "languages", ["Python"]),
                    architectures=_string_list(picker, "architectures", ["arm64", "x86_64"]),
                )

            # Scan settings
            if "scan" in config_data:
                scan = _section(config_data, "scan")
                directory = scan.get("directory")
                settings.scan = ScanSettings(
                    directory=str(directory) if directory is not None else None,
                    extension=str(scan.get("extension", "txt")).lstrip("."),
                )

            # Display settings
            if "display" in config_data:
                display = _section(config_data, "display")
                settings.display = DisplaySettings(
                    highlight_symbol=str(display.get("highlight_symbol", ">> ")),
                    highlight_color=str(display.get("highlight_color", "bright_green")),
                )

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging")
                settings.logging = LoggingSettings(
                    level=_log_level(log.get("level", "WARNING")),
                    file=log.get("file"),
                )

        # Override with environment variables
        log_level_env = os.getenv("PACKPICK_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = _log_level(log_level_env)

        log_file_env = os.getenv("PACKPICK_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        logging.getLogger(__name__).debug(f"Settings loaded (config: {config_path})")
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "picker": {
                "languages": list(self.picker.languages),
                "architectures": list(self.picker.architectures),
            },
            "scan": {
                "directory": self.scan.directory,
                "extension": self.scan.extension,
            },
            "display": {
                "highlight_symbol": self.display.highlight_symbol,
                "highlight_color": self.display.highlight_color,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }
