"""Archive tooling: stateless file-system helpers."""

from __future__ import annotations

from .config import IOSettings, load_settings
from .io import (
    close_quietly,
    copy_stream,
    copy_to_file,
    ensure_directory,
    list_immediate_children,
    relative_path,
)

__all__ = [
    "IOSettings",
    "close_quietly",
    "copy_stream",
    "copy_to_file",
    "ensure_directory",
    "list_immediate_children",
    "load_settings",
    "relative_path",
]
