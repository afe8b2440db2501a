"""
Custom exceptions for packpick.

Modified: 2026-10-17
"""


class PackPickError(Exception):
    """Base exception for all packpick errors."""

    pass


class EmptySelectionError(PackPickError, ValueError):
    """Raised when a selection list is built from no items."""

    pass


class ConfigurationError(PackPickError):
    """Raised when configuration is invalid or missing."""

    pass
