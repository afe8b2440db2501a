"""Centralized logger configuration.

The terminal belongs to the TUI while it runs, so records only go to a file.
Without a log file a NullHandler keeps the root logger quiet.

Modified: 2026-10-17
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None) -> None:
    handlers = []
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    else:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
