"""
TUI (Terminal User Interface) for packpick.

Textual-based three-column picker.

Modified: 2026-10-17
"""

__all__ = ["app", "keybindings"]
