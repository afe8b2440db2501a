"""
Core data models for packpick.

Selection lists with a wrap-around highlight, the archive name buffer,
and the result snapshot handed back when the picker exits.

Modified: 2026-10-17
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Any

from packpick.core.exceptions import EmptySelectionError


class SessionState(Enum):
    """Lifecycle of a picker session."""

    RUNNING = "running"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def is_terminated(self) -> bool:
        return self is not SessionState.RUNNING


class KeyAction(Enum):
    """Actions a key can be bound to."""

    CONFIRM = "confirm"
    CANCEL = "cancel"
    ARCH_PREVIOUS = "arch_previous"
    ARCH_NEXT = "arch_next"
    DELETE_CHAR = "delete_char"


class SelectionList:
    """
    Ordered, immutable list of items with at most one highlighted index.

    Starts with nothing highlighted. The first call to next() or previous()
    always lands on index 0; after that both directions wrap around.
    """

    def __init__(self, items: Iterable[str]):
        self._items: Tuple[str, ...] = tuple(items)
        if not self._items:
            raise EmptySelectionError("SelectionList needs at least one item")
        self._selected: Optional[int] = None

    @property
    def items(self) -> Tuple[str, ...]:
        return self._items

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def selected_item(self) -> Optional[str]:
        """The highlighted item, or None when nothing is highlighted."""
        if self._selected is None:
            return None
        return self._items[self._selected]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SelectionList(items={list(self._items)!r}, selected={self._selected!r})"

    def select(self, index: Optional[int]) -> None:
        """Highlight the item at index, or clear the highlight with None."""
        if index is not None and not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} items")
        self._selected = index

    def next(self) -> None:
        """Move the highlight down one row, wrapping from last to first."""
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected + 1) % len(self._items)

    def previous(self) -> None:
        """Move the highlight up one row, wrapping from first to last."""
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self._items) - 1
        else:
            self._selected -= 1


@dataclass
class TextBuffer:
    """Single-line text field contents."""

    content: str = ""

    def push(self, char: str) -> None:
        """Append one character."""
        if len(char) != 1:
            raise ValueError(f"push() takes a single character, got {char!r}")
        self.content += char

    def pop(self) -> Optional[str]:
        """Remove and return the last character; no-op on an empty buffer."""
        if not self.content:
            return None
        last = self.content[-1]
        self.content = self.content[:-1]
        return last

    def __str__(self) -> str:
        return self.content


@dataclass
class PickerResult:
    """
    Snapshot of the picker when it exits.

    Nothing is done with it beyond logging; the picker produces no artifact.
    """

    state: SessionState
    language: Optional[str] = None
    architecture: Optional[str] = None
    zip_name: str = ""

    @property
    def confirmed(self) -> bool:
        return self.state is SessionState.CONFIRMED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "state": self.state.value,
            "language": self.language,
            "architecture": self.architecture,
            "zip_name": self.zip_name,
        }
