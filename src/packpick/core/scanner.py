"""Directory scanner for the Txt Files panel.

Modified: 2026-10-17
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _display_name(name: str) -> str:
    """Replace bytes that are not valid UTF-8 with U+FFFD so the name can be drawn."""
    return os.fsencode(name).decode("utf-8", "replace")


def list_txt_files(directory: Optional[PathLike] = None, extension: str = "txt") -> List[str]:
    """
    List regular files in a directory whose extension matches exactly.

    Args:
        directory: Directory to read (default: current working directory)
        extension: Extension without the dot; matched case-sensitively

    Returns:
        Bare filenames in directory enumeration order (not sorted); undecodable
        bytes are replaced with U+FFFD

    Raises:
        OSError: If the directory cannot be read
    """
    target = Path(directory) if directory is not None else Path.cwd()
    suffix = f".{extension}"

    files = []
    with os.scandir(target) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            if Path(entry.name).suffix == suffix:
                files.append(_display_name(entry.name))
    return files


def scan_txt_files(directory: Optional[PathLike] = None, extension: str = "txt") -> List[str]:
    """Like list_txt_files(), but an unreadable directory yields an empty list."""
    try:
        return list_txt_files(directory, extension)
    except OSError as e:
        logger.debug(f"Directory scan failed, showing no files: {e}")
        return []
