"""Central keybinding registry for packpick.

Single source of truth for which keys do what, used by the key dispatcher
and by `packpick --keys`.

Modified: 2026-10-17
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.models import KeyAction


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name
    action: KeyAction
    description: str  # Human-readable description
    category: str = "General"  # Category for grouping in help
    hidden: bool = False  # Whether to show in help text


class KeybindingRegistry:
    """Central registry for all keybindings."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Exit
        self.register("enter", KeyAction.CONFIRM, "Confirm and exit", "Application")
        self.register("escape", KeyAction.CANCEL, "Cancel and exit", "Application")

        # Architecture list
        self.register("up", KeyAction.ARCH_PREVIOUS, "Previous architecture", "Navigation")
        self.register("down", KeyAction.ARCH_NEXT, "Next architecture", "Navigation")

        # Zip name
        self.register("backspace", KeyAction.DELETE_CHAR, "Delete last character", "Zip Name")

    def register(self, key: str, action: KeyAction, description: str,
                 category: str = "General",
                 hidden: bool = False) -> None:
        """Register a keybinding."""
        self.keybindings[key] = Keybinding(
            key=key,
            action=action,
            description=description,
            category=category,
            hidden=hidden
        )

    def resolve(self, key: str) -> Optional[KeyAction]:
        """Get the action bound to a key, or None if the key is unbound."""
        binding = self.keybindings.get(key)
        return binding.action if binding else None

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if not binding.hidden:
                if binding.category not in result:
                    result[binding.category] = []
                result[binding.category].append(binding)
        return result

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("packpick - keys\n")
        lines.append("=" * 40 + "\n")

        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")

            bindings = sorted(categories[category], key=lambda b: b.key)
            for binding in bindings:
                key_str = binding.key.ljust(12)
                lines.append(f"  {key_str} {binding.description}")

        lines.append("\n  Any other printable key is typed into the Zip Name field.")
        lines.append("\n" + "=" * 40)

        return "\n".join(lines)


# Global registry instance
registry = KeybindingRegistry()
