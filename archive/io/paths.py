from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from ..config import load_settings

logger = logging.getLogger(__name__)

__all__ = [
    "DirectoryListingError",
    "PathNotUnderRootError",
    "list_immediate_children",
    "relative_path",
]


class PathNotUnderRootError(ValueError):
    """Raised when a node is not a strict descendant of the given root."""

    def __init__(self, *, root: Path, node: Path, message: str) -> None:
        super().__init__(message)
        self.root = Path(root)
        self.node = Path(node)


class DirectoryListingError(OSError):
    """Raised in strict mode when a directory cannot be listed."""


def relative_path(root: Path | str, node: Path | str) -> str:
    """Return the path of *node* relative to *root*.

    Both paths are canonicalised first (symlinks resolved, must exist), so
    ``relative_path("/srv/app", "/srv/app/assembly/pom.xml")`` yields
    ``"assembly/pom.xml"``.

    Raises
    ------
    OSError
        If either path cannot be resolved.
    PathNotUnderRootError
        If *node* is *root* itself or lies outside it.
    """

    root_path = str(Path(root).resolve(strict=True))
    node_path = str(Path(node).resolve(strict=True))

    prefix = root_path if root_path.endswith(os.sep) else root_path + os.sep
    if not node_path.startswith(prefix) or len(node_path) == len(prefix):
        raise PathNotUnderRootError(
            root=Path(root_path),
            node=Path(node_path),
            message=f"'{node_path}' is not located under '{root_path}'",
        )
    return node_path[len(prefix):]


def list_immediate_children(
    path: Path | str, *, strict_listing: bool | None = None
) -> List[Path]:
    """Return the direct children of a directory, or ``[path]`` for anything else.

    Order follows the file system. A directory that cannot be read is reported
    as empty unless strict listing is enabled (``strict_listing`` or
    ``ARCHIVE_STRICT_LISTING``).
    """

    source = Path(path)
    if not source.is_dir():
        return [source]

    try:
        return list(source.iterdir())
    except OSError as exc:
        strict = (
            load_settings().strict_listing if strict_listing is None else strict_listing
        )
        if strict:
            raise DirectoryListingError(
                f"cannot list directory path={source} errno={exc.errno} reason={exc.strerror}"
            ) from exc
        logger.debug("listing failed path=%s err=%s", source, exc)
        return []
