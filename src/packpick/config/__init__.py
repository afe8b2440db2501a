"""
Configuration management for packpick.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/packpick/config.yaml)
- Environment variables

Modified: 2026-10-17
"""

from packpick.config.settings import (
    Settings,
    PickerSettings,
    ScanSettings,
    DisplaySettings,
    LoggingSettings,
)

__all__ = [
    "Settings",
    "PickerSettings",
    "ScanSettings",
    "DisplaySettings",
    "LoggingSettings",
]
