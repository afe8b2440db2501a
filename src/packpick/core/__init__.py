"""
Core logic for packpick.

Models, directory scanning and key dispatch. Nothing in here touches the terminal.

Modified: 2026-10-17
"""

from packpick.core.exceptions import (
    PackPickError,
    EmptySelectionError,
    ConfigurationError,
)

__all__ = [
    "PackPickError",
    "EmptySelectionError",
    "ConfigurationError",
]
