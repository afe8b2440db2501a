"""Main packpick TUI application.

Three-column picker: languages, txt files, and a right column holding the
architecture list above the zip name field.

Modified: 2026-10-17
"""

from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual import events

from ..core.models import PickerResult
from ..core.session import PickerSession
from ..config.settings import Settings

from .keybindings import registry
from .ui.panels import SelectionPanel, FileListPanel, ZipNamePanel


logger = logging.getLogger(__name__)


class PackPickApp(App[PickerResult], inherit_bindings=False):
    """Main application class for packpick.

    Textual's default quit bindings are not inherited: only Enter and Escape
    end a session.
    """

    TITLE = "packpick"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #columns {
        width: 100%;
        height: 100%;
    }

    #language-panel {
        width: 20%;
    }

    #files-panel {
        width: 50%;
    }

    #right-column {
        width: 30%;
        height: 100%;
    }

    #arch-panel {
        height: 50%;
    }

    #zip-panel {
        height: 50%;
    }
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[PickerSession] = None,
    ):
        """Initialize the application.

        Args:
            settings: Loaded settings (default: built-in defaults)
            session: Session to drive (default: built from settings)
        """
        super().__init__()

        self.settings = settings or Settings()
        self.session = session or PickerSession.create(
            languages=self.settings.picker.languages,
            architectures=self.settings.picker.architectures,
        )

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        display = self.settings.display

        with Horizontal(id="columns"):
            yield SelectionPanel(
                "Language",
                self.session.languages,
                highlight_symbol=display.highlight_symbol,
                highlight_color=display.highlight_color,
                id="language-panel",
            )
            yield FileListPanel(
                "Txt Files",
                directory=self.settings.scan.directory,
                extension=self.settings.scan.extension,
                id="files-panel",
            )
            with Vertical(id="right-column"):
                yield SelectionPanel(
                    "Architecture",
                    self.session.architectures,
                    highlight_symbol=display.highlight_symbol,
                    highlight_color=display.highlight_color,
                    id="arch-panel",
                )
                yield ZipNamePanel(self.session.zip_name, "Zip Name", id="zip-panel")

    def on_mount(self) -> None:
        logger.info(
            f"Picker started with {len(self.session.languages)} language(s) "
            f"and {len(self.session.architectures)} architecture(s)"
        )

    def refresh_panels(self) -> None:
        """Redraw every panel from the current session."""
        for panel in self.query("SelectionPanel, FileListPanel, ZipNamePanel"):
            panel.refresh()

    async def on_key(self, event: events.Key) -> None:
        """Handle keyboard events."""
        action = registry.resolve(event.key)
        character = event.character if event.is_printable else None

        state = self.session.dispatch(action, character)
        event.stop()

        if state.is_terminated:
            result = self.session.result()
            logger.info(f"Picker finished: {result.to_dict()}")
            self.exit(result)
            return

        self.refresh_panels()


def run_app(settings: Optional[Settings] = None) -> int:
    """Run the packpick TUI application.

    Textual restores the terminal on every exit path. Errors raised inside
    the app are reported by Textual after teardown and show up as a non-zero
    return code.

    Args:
        settings: Optional loaded settings

    Returns:
        Process exit code (0 on Enter or Escape)
    """
    app = PackPickApp(settings=settings)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(run_app())
