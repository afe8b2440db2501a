"""Bordered panels for the packpick layout.

Each panel re-renders from the session on every refresh; the Txt Files
panel rescans its directory on every render.

Modified: 2026-10-17
"""

from typing import List, Optional, Sequence

from rich.console import RenderableType
from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from ...core.models import SelectionList, TextBuffer
from ...core.scanner import scan_txt_files


PANEL_CSS = """
    {name} {{
        width: 100%;
        height: 100%;
        border: solid $accent;
        border-title-color: $text;
        border-title-style: bold;
    }}
"""


def render_list(
    items: Sequence[str],
    selected: Optional[int] = None,
    highlight_symbol: str = ">> ",
    highlight_style: Optional[Style] = None,
    width: int = 0,
) -> Text:
    """Render list items one per line, highlighting the selected row.

    Args:
        items: Lines to render
        selected: Index of the highlighted row, if any
        highlight_symbol: Marker drawn before the highlighted row
        highlight_style: Style of the highlighted row
        width: Pad the highlighted row to this width so the background fills it

    Returns:
        Rich Text with one line per item
    """
    text = Text(no_wrap=True, overflow="ellipsis")
    # Rows are indented to line up with the marker only while something is highlighted
    indent = " " * len(highlight_symbol) if selected is not None else ""

    for i, item in enumerate(items):
        if i:
            text.append("\n")
        if i == selected:
            line = f"{highlight_symbol}{item}"
            text.append(line.ljust(width), style=highlight_style)
        else:
            text.append(f"{indent}{item}")
    return text


class SelectionPanel(Widget):
    """Bordered list with a single highlighted row."""

    DEFAULT_CSS = PANEL_CSS.format(name="SelectionPanel")

    def __init__(
        self,
        title: str,
        selection: SelectionList,
        highlight_symbol: str = ">> ",
        highlight_color: str = "bright_green",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.border_title = title
        self.selection = selection
        self.highlight_symbol = highlight_symbol
        self.highlight_style = Style(bgcolor=highlight_color)

    def render(self) -> RenderableType:
        return render_list(
            self.selection.items,
            self.selection.selected,
            self.highlight_symbol,
            self.highlight_style,
            width=self.content_size.width,
        )


class FileListPanel(Widget):
    """Bordered, non-interactive list of the files found by the scanner."""

    DEFAULT_CSS = PANEL_CSS.format(name="FileListPanel")

    def __init__(
        self,
        title: str = "Txt Files",
        directory: Optional[str] = None,
        extension: str = "txt",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.border_title = title
        self.directory = directory
        self.extension = extension
        self.files: List[str] = []

    def render(self) -> RenderableType:
        self.files = scan_txt_files(self.directory, self.extension)
        return render_list(self.files)


class ZipNamePanel(Widget):
    """Bordered single-line view of the archive name buffer."""

    DEFAULT_CSS = PANEL_CSS.format(name="ZipNamePanel")

    def __init__(self, buffer: TextBuffer, title: str = "Zip Name", **kwargs):
        super().__init__(**kwargs)
        self.border_title = title
        self.buffer = buffer

    def render(self) -> RenderableType:
        return Text(self.buffer.content, no_wrap=True)
