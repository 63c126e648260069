"""Directory enforcement helpers with deterministic logging.

Environment knobs:
- ARCHIVE_STRICT_DIRS (default: false) -> raise instead of logging when a
  missing directory cannot be created

Log format for first-time creation:
  created dir path=/abs/path component=archive.io created=true
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from ..config import load_settings

_LOGGER = logging.getLogger(__name__)


class InvalidDirectoryError(ValueError):
    """Raised when a path cannot serve as a writable directory."""

    def __init__(self, *, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class DirectoryCreationError(OSError):
    """Raised in strict mode when a missing directory cannot be created."""


def _strict_default(strict: bool | None) -> bool:
    if strict is not None:
        return bool(strict)
    return load_settings().strict_dirs


def ensure_directory(
    path: Path | str,
    *,
    strict_dirs: bool | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """Make sure *path* is a writable directory, creating it when missing.

    An existing file or a read-only directory raises
    :class:`InvalidDirectoryError`. Creation failures are logged and ignored
    unless strict mode is on.
    """

    logger = logger or _LOGGER
    target = Path(path)

    if target.is_file():
        raise InvalidDirectoryError(
            path=target,
            message=f"{target} exists and is a file, directory or path expected.",
        )

    if not target.exists():
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            if _strict_default(strict_dirs):
                raise DirectoryCreationError(
                    f"failed to create directory path={target} errno={exc.errno} reason={exc.strerror}"
                ) from exc
            logger.warning(
                "dir not created path=%s errno=%s reason=%s",
                target,
                exc.errno,
                exc.strerror,
            )
            return target
        logger.info(
            "created dir path=%s component=archive.io created=true",
            target.resolve(),
        )
        return target

    if not os.access(target, os.W_OK):
        raise InvalidDirectoryError(path=target, message=f"{target} is not writeable.")
    return target


def ensure_directories(
    paths: Iterable[Path | str],
    *,
    strict_dirs: bool | None = None,
    logger: logging.Logger | None = None,
) -> List[Path]:
    """Ensure a batch of directories, stopping at the first invalid entry."""

    strict = _strict_default(strict_dirs)
    return [
        ensure_directory(entry, strict_dirs=strict, logger=logger) for entry in paths
    ]


__all__ = [
    "DirectoryCreationError",
    "InvalidDirectoryError",
    "ensure_directories",
    "ensure_directory",
]
