"""File-system helpers for copying streams, resolving paths and preparing directories."""

from .dirs import (
    DirectoryCreationError,
    InvalidDirectoryError,
    ensure_directories,
    ensure_directory,
)
from .paths import (
    DirectoryListingError,
    PathNotUnderRootError,
    list_immediate_children,
    relative_path,
)
from .streams import DEFAULT_BUFFER_SIZE, close_quietly, copy_stream, copy_to_file

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "close_quietly",
    "copy_stream",
    "copy_to_file",
    "DirectoryCreationError",
    "DirectoryListingError",
    "ensure_directories",
    "ensure_directory",
    "InvalidDirectoryError",
    "list_immediate_children",
    "PathNotUnderRootError",
    "relative_path",
]
