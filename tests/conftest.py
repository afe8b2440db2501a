"""Shared test fixtures for packpick tests.

Created: 2026-10-17
"""

import pytest

from packpick.config.settings import Settings, ScanSettings
from packpick.core.session import PickerSession


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir so a real ~/.config/packpick is never read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("PACKPICK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PACKPICK_LOG_FILE", raising=False)
    return home


@pytest.fixture
def txt_dir(tmp_path):
    """Directory with a mix of .txt and other entries."""
    directory = tmp_path / "work"
    directory.mkdir()
    (directory / "a.txt").write_text("a")
    (directory / "b.log").write_text("b")
    (directory / "c.TXT").write_text("c")
    (directory / "notes.txt").write_text("notes")
    (directory / "folder.txt").mkdir()
    return directory


@pytest.fixture
def session():
    """Session with the default language and architecture lists."""
    return PickerSession.create()


@pytest.fixture
def settings(txt_dir):
    """Default settings scanning the txt_dir fixture."""
    return Settings(scan=ScanSettings(directory=str(txt_dir)))
