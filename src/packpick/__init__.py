"""
packpick - terminal picker

Presents a language list, the .txt files in the working directory,
an architecture list and an archive name field, then exits on Enter or Escape.

Created: 2026-10-17
"""

__version__ = "0.1.0"
