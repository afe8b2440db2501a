"""
Picker session state and input dispatch.

A PickerSession owns everything the picker mutates while it runs. The TUI
resolves each key to a KeyAction (or a printable character) and hands it to
dispatch(); rendering only ever reads from the session.

Modified: 2026-10-17
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from packpick.core.models import (
    KeyAction,
    PickerResult,
    SelectionList,
    SessionState,
    TextBuffer,
)


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES = ("Python",)
DEFAULT_ARCHITECTURES = ("arm64", "x86_64")


@dataclass
class PickerSession:
    """Root aggregate for one run of the picker."""

    languages: SelectionList = field(default_factory=lambda: SelectionList(DEFAULT_LANGUAGES))
    architectures: SelectionList = field(
        default_factory=lambda: SelectionList(DEFAULT_ARCHITECTURES)
    )
    zip_name: TextBuffer = field(default_factory=TextBuffer)
    state: SessionState = SessionState.RUNNING

    @classmethod
    def create(
        cls,
        languages: Optional[Sequence[str]] = None,
        architectures: Optional[Sequence[str]] = None,
    ) -> "PickerSession":
        """
        Build a session with fresh state.

        Args:
            languages: Items for the language panel (default: ["Python"])
            architectures: Items for the architecture panel (default: ["arm64", "x86_64"])

        Returns:
            PickerSession instance

        Raises:
            EmptySelectionError: If either list is empty
        """
        return cls(
            languages=SelectionList(languages if languages is not None else DEFAULT_LANGUAGES),
            architectures=SelectionList(
                architectures if architectures is not None else DEFAULT_ARCHITECTURES
            ),
        )

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def dispatch(self, action: Optional[KeyAction], character: Optional[str] = None) -> SessionState:
        """
        Apply one key press to the session.

        Args:
            action: Bound action for the key, or None for an unbound key
            character: Printable character for the key, used when action is None

        Returns:
            The session state after the key
        """
        if not self.running:
            return self.state

        if action is None:
            if character is not None and len(character) == 1 and character.isprintable():
                self.zip_name.push(character)
        elif action is KeyAction.DELETE_CHAR:
            self.zip_name.pop()
        elif action is KeyAction.CONFIRM:
            self._terminate(SessionState.CONFIRMED)
        elif action is KeyAction.CANCEL:
            self._terminate(SessionState.CANCELLED)
        elif action is KeyAction.ARCH_PREVIOUS:
            self.architectures.previous()
        elif action is KeyAction.ARCH_NEXT:
            self.architectures.next()

        return self.state

    def _terminate(self, state: SessionState) -> None:
        self.state = state
        logger.info(f"Session {state.value}")

    def result(self) -> PickerResult:
        """Snapshot the current selections."""
        return PickerResult(
            state=self.state,
            language=self.languages.selected_item,
            architecture=self.architectures.selected_item,
            zip_name=self.zip_name.content,
        )
