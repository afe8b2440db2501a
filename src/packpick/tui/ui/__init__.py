"""
UI components for packpick TUI.

Modified: 2026-10-17
"""

__all__ = [
    "panels",
]
