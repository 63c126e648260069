"""Byte stream copying with caller-owned streams.

``copy_stream`` never closes what it is given. ``copy_to_file`` owns the
destination handle it opens and releases it on every exit path; errors raised
while closing that handle are swallowed by :func:`close_quietly`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any

from ..config import DEFAULT_BUFFER_SIZE, load_settings
from .dirs import DirectoryCreationError

logger = logging.getLogger(__name__)


def close_quietly(closeable: Any) -> None:
    """Null-safe ``close()`` that swallows whatever closing raises."""

    if closeable is None:
        return
    try:
        closeable.close()
    except Exception as exc:
        logger.debug("close suppressed target=%r err=%s", closeable, exc)


def copy_stream(
    input: IO[bytes], output: IO[bytes], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """Copy *input* into *output* chunk by chunk and return the byte count.

    Reads stop at the first empty chunk. Neither stream is closed, and bytes
    already written are left in place if a later read or write fails.
    """

    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise ValueError(f"buffer_size must be an int, got {buffer_size!r}")
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    count = 0
    while True:
        chunk = input.read(buffer_size)
        if not chunk:
            break
        output.write(chunk)
        count += len(chunk)

    logger.debug("copied stream bytes=%d buffer_size=%d", count, buffer_size)
    return count


def _prepare_parent(destination: Path, strict: bool) -> None:
    parent = destination.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if strict:
            raise DirectoryCreationError(
                f"failed to create directory path={parent} errno={exc.errno} reason={exc.strerror}"
            ) from exc
        logger.warning(
            "parent dir not created path=%s errno=%s reason=%s",
            parent,
            exc.errno,
            exc.strerror,
        )


def copy_to_file(
    source: IO[bytes],
    destination: Path | str,
    *,
    buffer_size: int | None = None,
    strict_dirs: bool | None = None,
) -> int:
    """Copy *source* into the file at *destination*, creating or truncating it.

    Missing parent directories are created first. When that fails the error
    is logged and the open is attempted anyway, unless strict directory
    creation is enabled (``strict_dirs`` or ``ARCHIVE_STRICT_DIRS``), in which
    case :class:`DirectoryCreationError` is raised.
    """

    destination = Path(destination)
    if buffer_size is None or strict_dirs is None:
        settings = load_settings()
        if buffer_size is None:
            buffer_size = settings.copy_buffer_size
        if strict_dirs is None:
            strict_dirs = settings.strict_dirs

    output: IO[bytes] | None = None
    try:
        _prepare_parent(destination, strict_dirs)
        output = destination.open("wb")
        count = copy_stream(source, output, buffer_size)
        # buffered tail must fail here, not inside close_quietly
        output.flush()
    finally:
        close_quietly(output)

    logger.debug("copied to file path=%s bytes=%d", destination, count)
    return count


__all__ = ["DEFAULT_BUFFER_SIZE", "close_quietly", "copy_stream", "copy_to_file"]
